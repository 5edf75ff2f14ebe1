from .algebra import bit_length, power_mod, reduce
from .ballot import ballot_fingerprint, compute_ballot, compute_secrets
from .errors import BallotError, InvalidParametersError, InvalidSelectionError, MissingSharesError
from .models import BallotOutput, CollectorQuestionShare, VotingVectorPair
from .params import default_params, generator_prime_pair, validate_params
from .schemas import (
    CollectorElectionParameters,
    CollectorQuestionParameters,
    ElectionParameters,
    QuestionParameters,
    VotingData,
)
from .shares import combine_location_shares, sum_collector_shares
from .voting import VoterSession
from .voting_vector import check_selection, get_voting_vector
