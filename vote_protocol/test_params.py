import inspect

import pytest
from Crypto.Util.number import isPrime

from vote_protocol.config import PRIME_BITS
from vote_protocol.errors import InvalidParametersError
from vote_protocol.params import (
    PARAM_P,
    check_params,
    default_params,
    find_generator,
    generator_prime_pair,
    is_primitive_root,
    validate_params,
)


def test_find_generator_small_safe_prime():
    # 23 = 2 * 11 + 1 ; 2, 3 et 4 sont des résidus quadratiques
    assert find_generator(23) == 5
    assert is_primitive_root(5, 23, (2, 11))
    assert not is_primitive_root(2, 23, (2, 11))

def test_find_generator_rejects_unsafe_prime():
    with pytest.raises(InvalidParametersError):
        find_generator(29)  # 14 n'est pas premier
    with pytest.raises(InvalidParametersError):
        find_generator(21)

def test_validate_params():
    assert validate_params(23, 5)
    assert not validate_params(24, 5)
    assert not validate_params(2, 1)
    assert not validate_params(23, 1)
    assert not validate_params(23, 23)
    assert not validate_params(23, 0)

def test_check_params_raises():
    check_params(23, 5)
    with pytest.raises(InvalidParametersError):
        check_params(22, 5)
    with pytest.raises(InvalidParametersError):
        check_params(23, 24)

def test_generator_prime_pair():
    g, p = generator_prime_pair(32)
    assert p.bit_length() == 32
    assert isPrime(p) and isPrime((p - 1) // 2)
    assert is_primitive_root(g, p, (2, (p - 1) // 2))
    assert validate_params(p, g)

def test_generator_prime_pair_default_size():
    default = inspect.signature(generator_prime_pair).parameters["num_bits"].default
    assert default == PRIME_BITS == 2048

def test_generator_prime_pair_too_small():
    with pytest.raises(InvalidParametersError):
        generator_prime_pair(4)

def test_default_params():
    g, p = default_params()
    assert p == PARAM_P
    assert p.bit_length() == 2048
    assert validate_params(p, g)
    assert is_primitive_root(g, p, (2, (p - 1) // 2))
