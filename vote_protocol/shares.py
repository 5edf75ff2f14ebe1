import logging
from typing import Iterable, Sequence

from .algebra import reduce
from .errors import MissingSharesError
from .models import CollectorQuestionShare

logger = logging.getLogger(__name__)


def check_collector_count(shares: Sequence[CollectorQuestionShare], num_collectors: int) -> None:
    """
    Vérifie qu'il y a exactement une part par collecteur

    Raises:
        MissingSharesError: Si des parts manquent ou sont en trop
    """
    if len(shares) != num_collectors:
        raise MissingSharesError(
            f"{len(shares)} parts reçues pour {num_collectors} collecteurs"
        )

def sum_collector_shares(shares: Iterable[CollectorQuestionShare]) -> CollectorQuestionShare:
    """
    Additionne les parts de tous les collecteurs d'une question

    Les sommes sont des sommes entières simples : aucune réduction n'est
    faite terme à terme.

    Raises:
        MissingSharesError: Si la liste est vide
    """
    shares = list(shares)
    if not shares:
        raise MissingSharesError("Aucune part de collecteur fournie")

    total = CollectorQuestionShare(
        forward_verification_share=sum(s.forward_verification_share for s in shares),
        reverse_verification_share=sum(s.reverse_verification_share for s in shares),
        forward_ballot_share=sum(s.forward_ballot_share for s in shares),
        reverse_ballot_share=sum(s.reverse_ballot_share for s in shares),
    )
    logger.debug("Parts de %d collecteurs additionnées", len(shares))
    return total

def combine_location_shares(location_shares: Iterable[int], prime: int) -> int:
    """
    Reconstruit la position chiffrée du votant à partir des parts des collecteurs

    Args:
        location_shares: Une part de position par collecteur
        prime: Le premier de l'élection

    Returns:
        int: La somme des parts modulo p - 1
    """
    location_shares = list(location_shares)
    if not location_shares:
        raise MissingSharesError("Aucune part de position fournie")
    if any(share is None for share in location_shares):
        raise MissingSharesError("Un collecteur n'a pas fourni de part de position")
    return reduce(sum(location_shares), prime - 1)
