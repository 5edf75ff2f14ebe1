"""
Calcul du bulletin publiable d'un votant pour une question.

Les vecteurs de vote sont masqués par les parts des collecteurs :

    s  = x  - sum(verification avant)   mod p-1
    s' = x' - sum(verification arrière) mod p-1
    p_i  = s  + sum(ballot avant)        mod p-1
    p_i' = s' + sum(ballot arrière)      mod p-1

Les engagements g^s, g^s' et g^(s*s') (mod p) permettent à un tiers de
vérifier la structure du bulletin sans apprendre s ni s'.
"""
import logging
from typing import Iterable, Tuple

from Crypto.Hash import SHA256

from .algebra import int_to_bytes, power_mod, reduce
from .errors import InvalidParametersError
from .models import BallotOutput, CollectorQuestionShare
from .params import check_params
from .shares import sum_collector_shares

logger = logging.getLogger(__name__)


def _check_vectors(forward_vector: int, reverse_vector: int) -> None:
    if forward_vector < 0 or reverse_vector < 0:
        raise InvalidParametersError("Les vecteurs de vote doivent être positifs")

def compute_secrets(forward_vector: int, reverse_vector: int, prime: int,
                    total: CollectorQuestionShare) -> Tuple[int, int]:
    """
    Calcule les secrets (s, s') du votant

    Args:
        forward_vector, reverse_vector: Les vecteurs de vote
        prime: Le premier de l'élection
        total: Les parts déjà additionnées sur tous les collecteurs

    Returns:
        Tuple[int, int]: (s, s') dans [0, p-1)
    """
    _check_vectors(forward_vector, reverse_vector)
    modulus = prime - 1

    # Les résultats intermédiaires peuvent être négatifs avant réduction
    secret = reduce(forward_vector - total.forward_verification_share, modulus)
    secret_prime = reduce(reverse_vector - total.reverse_verification_share, modulus)
    return secret, secret_prime

def compute_ballot(forward_vector: int, reverse_vector: int, prime: int, generator: int,
                   collector_shares: Iterable[CollectorQuestionShare]) -> BallotOutput:
    """
    Calcule le bulletin complet à soumettre au serveur

    Args:
        forward_vector: Vecteur de vote avant
        reverse_vector: Vecteur de vote arrière
        prime: Le premier p de l'élection
        generator: Racine primitive g modulo p
        collector_shares: Une part par collecteur, tous les collecteurs requis

    Returns:
        BallotOutput: Les ballots (mod p-1) et les engagements (mod p)

    Raises:
        InvalidParametersError: Si p, g ou les vecteurs sont invalides
        MissingSharesError: Si aucune part n'est fournie
    """
    check_params(prime, generator)
    collector_shares = list(collector_shares)
    total = sum_collector_shares(collector_shares)
    modulus = prime - 1

    secret, secret_prime = compute_secrets(forward_vector, reverse_vector, prime, total)

    # Engagements : l'exposant du dernier est le produit des deux secrets
    g_s = power_mod(generator, secret, prime)
    g_s_prime = power_mod(generator, secret_prime, prime)
    g_s_s_prime = power_mod(generator, secret * secret_prime, prime)

    forward_ballot = reduce(secret + total.forward_ballot_share, modulus)
    reverse_ballot = reduce(secret_prime + total.reverse_ballot_share, modulus)

    logger.debug("Bulletin calculé avec %d parts de collecteurs (p de %d bits)",
                 len(collector_shares), prime.bit_length())

    return BallotOutput(
        forward_ballot=forward_ballot,
        reverse_ballot=reverse_ballot,
        g_s=g_s,
        g_s_prime=g_s_prime,
        g_s_s_prime=g_s_s_prime,
    )

def ballot_fingerprint(ballot: BallotOutput) -> str:
    """
    Empreinte SHA-256 d'un bulletin, à comparer avec l'enregistrement publié

    Chaque valeur est préfixée par sa longueur pour éviter les ambiguïtés de
    concaténation.
    """
    h = SHA256.new()
    for value in (ballot.forward_ballot, ballot.reverse_ballot,
                  ballot.g_s, ballot.g_s_prime, ballot.g_s_s_prime):
        data = int_to_bytes(value)
        h.update(len(data).to_bytes(4, "big"))
        h.update(data)
    return h.hexdigest()
