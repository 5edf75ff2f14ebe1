import logging
from functools import lru_cache
from typing import Iterable, Tuple

from Crypto.Util.number import getPrime, isPrime

from .algebra import mod_inv, power_mod
from .config import MIN_PRIME_BITS, PRIME_BITS
from .errors import InvalidParametersError

logger = logging.getLogger(__name__)

## Premier sûr p = 2q + 1 -- groupe MODP 2048 bits extrait de la RFC 3526
PARAM_P = int(
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD1"
    "29024E088A67CC74020BBEA63B139B22514A08798E3404DD"
    "EF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245"
    "E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
    "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3D"
    "C2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F"
    "83655D23DCA3AD961C62F356208552BB9ED529077096966D"
    "670C354E4ABC9804F1746C08CA18217C32905E462E36CE3B"
    "E39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9"
    "DE2BCBF6955817183995497CEA956AE515D2261898FA0510"
    "15728E5A8AACAA68FFFFFFFFFFFFFFFF",
    16,
)

def is_primitive_root(generator: int, prime: int, factors: Iterable[int]) -> bool:
    """
    Vérifie que generator est une racine primitive modulo prime

    Args:
        generator: Le candidat générateur
        prime: Le module premier
        factors: Les facteurs premiers distincts de prime - 1

    Returns:
        bool: True si g^((p-1)/f) != 1 (mod p) pour tout facteur f
    """
    totient = prime - 1
    return all(power_mod(generator, totient // f, prime) != 1 for f in factors)

def find_generator(prime: int) -> int:
    """
    Cherche la plus petite racine primitive d'un premier sûr p = 2q + 1

    Comme p est sûr, les facteurs premiers de p - 1 sont toujours 2 et q.
    """
    if prime < 5 or not isPrime(prime) or not isPrime((prime - 1) // 2):
        raise InvalidParametersError(f"{prime} n'est pas un premier sûr")

    factors = (2, (prime - 1) // 2)
    g = 2
    while not is_primitive_root(g, prime, factors):
        g += 1
    return g

def generator_prime_pair(num_bits: int = PRIME_BITS) -> Tuple[int, int]:
    """
    Génère une paire (générateur, premier) pour Z*p avec p de num_bits bits

    Args:
        num_bits: Taille du premier sûr à générer

    Returns:
        Tuple[int, int]: (g, p) où g est une racine primitive modulo p
    """
    if num_bits < MIN_PRIME_BITS:
        raise InvalidParametersError(f"Taille de premier trop faible: {num_bits} bits")

    attempts = 0
    while True:
        attempts += 1
        q = getPrime(num_bits - 1)
        p = 2 * q + 1
        if p.bit_length() == num_bits and isPrime(p):
            break

    logger.debug("Premier sûr de %d bits trouvé après %d essais", num_bits, attempts)
    return find_generator(p), p

def validate_params(prime: int, generator: int) -> bool:
    """
    Vérifie que les paramètres de l'élection sont utilisables
    """
    try:
        check_params(prime, generator)
    except InvalidParametersError:
        return False
    return True

def check_params(prime: int, generator: int) -> None:
    """
    Vérifie les paramètres de l'élection et lève une exception explicite

    Raises:
        InvalidParametersError: Si le premier ou le générateur est invalide
    """
    if prime <= 2 or not isPrime(prime):
        raise InvalidParametersError(f"Le module de l'élection n'est pas un premier > 2: {prime}")
    if not 1 < generator < prime:
        raise InvalidParametersError(f"Le générateur doit être dans ]1, p[, reçu: {generator}")
    # Le générateur doit être inversible modulo p
    mod_inv(generator, prime)

@lru_cache(maxsize=None)
def default_params() -> Tuple[int, int]:
    """Paire (générateur, premier) par défaut, basée sur PARAM_P"""
    return find_generator(PARAM_P), PARAM_P
