import logging
from typing import Collection, Iterable, List, Sequence

from .ballot import compute_ballot
from .config import NUM_COLLECTORS
from .errors import InvalidParametersError, InvalidSelectionError, MissingSharesError
from .models import BallotOutput, CollectorQuestionShare, VotingVectorPair
from .schemas import CollectorElectionParameters, ElectionParameters
from .shares import check_collector_count, combine_location_shares
from .voting_vector import check_selection, get_voting_vector

logger = logging.getLogger(__name__)


class VoterSession:
    def __init__(self, election_params: ElectionParameters, encrypted_location: int,
                 num_collectors: int = NUM_COLLECTORS):
        """
        Session de vote d'un votant pour une élection

        Args:
            election_params: Paramètres publics de l'élection
            encrypted_location: Position secrète du votant, réutilisée pour
                toutes les questions de l'élection
            num_collectors: Nombre de collecteurs dont les parts sont requises
        """
        if not 0 <= encrypted_location < election_params.num_registered:
            raise InvalidParametersError("Position chiffrée hors du champ de vote")
        if num_collectors < 1:
            raise InvalidParametersError("Il faut au moins un collecteur")

        self.election_params = election_params
        self.encrypted_location = encrypted_location
        self.num_collectors = num_collectors

    @classmethod
    def from_wire(cls, election_params: ElectionParameters,
                  collector_params: Sequence[CollectorElectionParameters]) -> "VoterSession":
        """Construit la session à partir des réponses de tous les collecteurs"""
        if not collector_params:
            raise MissingSharesError("Aucun paramètre de collecteur reçu")

        location = combine_location_shares(
            (params.encrypted_location for params in collector_params),
            election_params.prime,
        )
        return cls(election_params, location, num_collectors=len(collector_params))

    def create_vote(self, question_index: int, candidates: Iterable[int],
                    cheat_mode: bool = False) -> VotingVectorPair:
        """Crée les vecteurs de vote pour une question"""
        num_candidates = self.election_params.num_candidates(question_index)
        candidates = list(candidates)
        check_selection(candidates, num_candidates, cheat_mode=cheat_mode)
        return get_voting_vector(
            candidates,
            self.encrypted_location,
            num_candidates,
            self.election_params.num_registered,
        )

    def cast_vote(self, question_index: int, candidates: Iterable[int],
                  collector_shares: Iterable[CollectorQuestionShare],
                  cheat_mode: bool = False) -> BallotOutput:
        """
        Calcule le bulletin d'une question

        Args:
            question_index: Indice de la question (0...m-1)
            candidates: Candidats choisis
            collector_shares: Une part par collecteur pour cette question
            cheat_mode: Autorise plusieurs candidats (ou aucun)

        Returns:
            BallotOutput: Le bulletin à transmettre au serveur
        """
        collector_shares = list(collector_shares)
        check_collector_count(collector_shares, self.num_collectors)
        vectors = self.create_vote(question_index, candidates, cheat_mode=cheat_mode)

        ballot = compute_ballot(
            vectors.forward_vector,
            vectors.reverse_vector,
            self.election_params.prime,
            self.election_params.generator,
            collector_shares,
        )
        logger.info("Bulletin calculé pour la question %d", question_index)
        return ballot

    def cast_ballots(self, selections: Sequence[Collection[int]],
                     shares_by_question: Sequence[Sequence[CollectorQuestionShare]],
                     cheat_mode: bool = False) -> List[BallotOutput]:
        """Calcule les bulletins de toutes les questions de l'élection"""
        num_questions = len(self.election_params.questions)
        if len(selections) != num_questions:
            raise InvalidSelectionError(
                f"{len(selections)} sélections reçues pour {num_questions} questions"
            )
        if len(shares_by_question) != num_questions:
            raise MissingSharesError(
                f"Parts reçues pour {len(shares_by_question)} questions sur {num_questions}"
            )

        return [
            self.cast_vote(i, candidates, shares, cheat_mode=cheat_mode)
            for i, (candidates, shares) in enumerate(zip(selections, shares_by_question))
        ]
