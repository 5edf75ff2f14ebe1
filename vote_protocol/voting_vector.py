"""
Encodage positionnel du choix d'un votant.

Le champ de vote contient num_candidates * num_registered bits. Chaque
votant occupe une tranche de num_candidates bits, repérée par sa position
chiffrée (encrypted location). Le vecteur avant place la tranche depuis le
bit de poids faible ; le vecteur arrière inverse l'ordre des candidats et
place la tranche depuis le bit de poids fort. La somme des vecteurs de tous
les votants donne le décompte, et les deux sommes se contrôlent mutuellement.

Cet encodage ne chiffre rien : la confidentialité vient du secret de la
position et du masquage par les parts des collecteurs (voir ballot.py).
"""
import logging
from typing import Collection, Iterable

from .errors import InvalidParametersError, InvalidSelectionError
from .models import VotingVectorPair

logger = logging.getLogger(__name__)


def check_selection(candidates: Collection[int], num_candidates: int, cheat_mode: bool = False) -> None:
    """
    Vérifie une sélection de candidats

    En mode normal, exactement un candidat doit être choisi. Le mode "triche"
    autorise n'importe quel sous-ensemble (y compris vide) : le protocole
    lui-même n'impose pas un seul candidat par question, c'est la
    vérification côté serveur qui rejette ce genre de bulletin.

    Raises:
        InvalidSelectionError: Si la sélection est invalide
    """
    if num_candidates < 1:
        raise InvalidParametersError("Une question doit avoir au moins un candidat")

    chosen = list(candidates)
    if len(set(chosen)) != len(chosen):
        raise InvalidSelectionError("Candidat sélectionné plusieurs fois")

    for c in chosen:
        if isinstance(c, bool) or not isinstance(c, int) or not 0 <= c < num_candidates:
            raise InvalidSelectionError(f"Candidat invalide: {c!r}")

    if not cheat_mode and len(chosen) != 1:
        raise InvalidSelectionError("Vote invalide: un seul candidat doit être choisi")

def encode_bits(candidates: Collection[int]) -> int:
    """Un bit par candidat choisi, le candidat 0 étant le bit de poids faible"""
    bits_set = 0
    for c in candidates:
        bits_set |= 1 << c
    return bits_set

def encode_reverse_bits(candidates: Collection[int], num_candidates: int) -> int:
    """Comme encode_bits, mais avec l'ordre des candidats inversé"""
    bits_set = 0
    for c in candidates:
        bits_set |= 1 << (num_candidates - (c + 1))
    return bits_set

def get_voting_vector(candidates: Iterable[int], encrypted_location: int,
                      num_candidates: int, num_registered: int) -> VotingVectorPair:
    """
    Calcule les vecteurs de vote avant et arrière pour une question

    Args:
        candidates: Indices des candidats choisis (0...n-1), sans doublon
        encrypted_location: Position secrète du votant dans [0, num_registered)
        num_candidates: Nombre de candidats de la question
        num_registered: Nombre de votants inscrits

    Returns:
        VotingVectorPair: Les deux vecteurs, de au plus n * N bits

    Raises:
        InvalidParametersError: Si les tailles ou la position sont invalides
        InvalidSelectionError: Si un candidat est hors bornes ou en double
    """
    if num_candidates < 1 or num_registered < 1:
        raise InvalidParametersError(
            f"Tailles invalides: {num_candidates} candidats, {num_registered} inscrits"
        )
    if not 0 <= encrypted_location < num_registered:
        raise InvalidParametersError("Position chiffrée hors du champ de vote")

    # Un itérateur ne peut être parcouru qu'une fois
    candidates = list(candidates)
    check_selection(candidates, num_candidates, cheat_mode=True)

    if not candidates:
        return VotingVectorPair(forward_vector=0, reverse_vector=0)

    num_total_bits = num_candidates * num_registered
    bit_shift = encrypted_location * num_candidates

    forward_vector = encode_bits(candidates) << bit_shift

    # Tranche miroir : le bit du candidat c en position L se retrouve au bit
    # T - 1 - (L * n + c), image exacte du bit avant
    reverse_bits_set = encode_reverse_bits(candidates, num_candidates)
    reverse_shift = num_total_bits - (bit_shift + num_candidates)
    reverse_vector = reverse_bits_set << reverse_shift

    logger.debug("Vecteurs de vote calculés sur un champ de %d bits", num_total_bits)
    return VotingVectorPair(forward_vector=forward_vector, reverse_vector=reverse_vector)
