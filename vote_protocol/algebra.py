"""
Primitives d'arithmétique modulaire sur des entiers de précision arbitraire.

Toutes les valeurs du protocole (vecteurs de vote, parts des collecteurs,
secrets et engagements) sont des entiers Python non bornés : aucune
troncature n'est jamais appliquée.
"""
from .errors import InvalidParametersError


def _check_modulus(modulus: int) -> None:
    if not isinstance(modulus, int) or isinstance(modulus, bool):
        raise TypeError("Le module doit être un entier")
    if modulus == 0:
        raise ZeroDivisionError("Module nul")
    if modulus < 0:
        raise InvalidParametersError(f"Le module doit être positif, reçu: {modulus}")

def reduce(value: int, modulus: int) -> int:
    """
    Réduit une valeur modulo `modulus` (modulo mathématique, jamais négatif)

    Args:
        value: La valeur à réduire, éventuellement négative
        modulus: Le module (> 0)

    Returns:
        int: La valeur dans [0, modulus)

    Raises:
        ZeroDivisionError: Si le module est nul
        InvalidParametersError: Si le module est négatif
    """
    _check_modulus(modulus)
    # Le % de Python suit le signe du diviseur : le résultat est déjà dans [0, modulus)
    return value % modulus

def power_mod(base: int, exponent: int, modulus: int) -> int:
    """
    Calcule base^exponent mod modulus par exponentiation rapide

    Args:
        base: La base
        exponent: L'exposant (>= 0), de taille quelconque
        modulus: Le module (> 0)

    Returns:
        int: Le résultat dans [0, modulus)
    """
    _check_modulus(modulus)
    if exponent < 0:
        raise InvalidParametersError("L'exposant doit être positif ou nul")
    return pow(base, exponent, modulus)

def bit_length(value: int) -> int:
    """Nombre de bits de la représentation binaire de value (0 pour 0)"""
    if value < 0:
        raise InvalidParametersError("La longueur en bits n'est définie que pour les entiers positifs")
    return value.bit_length()

def mod_inv(value: int, modulus: int) -> int:
    """
    Calcule l'inverse modulaire de value

    Raises:
        InvalidParametersError: Si value n'est pas inversible modulo modulus
    """
    _check_modulus(modulus)
    try:
        return pow(value, -1, modulus)
    except ValueError as exc:
        raise InvalidParametersError(f"{value} n'est pas inversible modulo {modulus}") from exc

def int_to_bytes(value: int) -> bytes:
    """Encodage big-endian minimal d'un entier positif (un octet pour 0)"""
    if value < 0:
        raise InvalidParametersError("Seuls les entiers positifs peuvent être encodés")
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")
