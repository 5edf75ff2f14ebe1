from dataclasses import dataclass


@dataclass(frozen=True)
class VotingVectorPair:
    """Vecteurs de vote avant et arrière d'un votant pour une question"""
    forward_vector: int
    reverse_vector: int

@dataclass(frozen=True)
class CollectorQuestionShare:
    """Parts émises par un collecteur pour une question (toutes dans [0, p-1))"""
    forward_verification_share: int
    reverse_verification_share: int
    forward_ballot_share: int
    reverse_ballot_share: int

@dataclass(frozen=True)
class BallotOutput:
    """Bulletin publiable : ballots (mod p-1) et engagements (mod p)"""
    forward_ballot: int    # p_i
    reverse_ballot: int    # p_i'
    g_s: int               # g^(s_i)
    g_s_prime: int         # g^(s_i')
    g_s_s_prime: int       # g^(s_i * s_i')
