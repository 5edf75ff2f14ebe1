import random

import pytest

from vote_protocol.errors import InvalidParametersError, InvalidSelectionError
from vote_protocol.voting_vector import (
    check_selection,
    encode_bits,
    encode_reverse_bits,
    get_voting_vector,
)


def set_bits(value):
    return [i for i in range(value.bit_length()) if value >> i & 1]


def test_concrete_scenario():
    # n = 2 candidats, N = 3 inscrits, position 1, candidat 0
    vectors = get_voting_vector({0}, 1, 2, 3)
    assert vectors.forward_vector == 4            # 0b000100
    assert encode_reverse_bits({0}, 2) == 2
    assert vectors.reverse_vector == 8            # 0b001000

def test_selection_as_iterator():
    vectors = get_voting_vector(iter([0]), 1, 2, 3)
    assert vectors.forward_vector == 4
    assert vectors.reverse_vector == 8

    vectors = get_voting_vector((c for c in [1, 3]), 0, 4, 2)
    assert vectors == get_voting_vector({1, 3}, 0, 4, 2)

    with pytest.raises(InvalidSelectionError):
        get_voting_vector(iter([2]), 0, 2, 3)

def test_empty_selection_gives_zero_vectors():
    vectors = get_voting_vector(set(), 2, 4, 5)
    assert vectors.forward_vector == 0
    assert vectors.reverse_vector == 0

def test_encode_bits():
    assert encode_bits({0, 2}) == 0b101
    assert encode_reverse_bits({0, 2}, 4) == 0b1010
    assert encode_reverse_bits({3}, 4) == 0b0001

def test_forward_locality():
    rng = random.Random(42)
    for _ in range(200):
        n = rng.randint(1, 8)
        big_n = rng.randint(1, 40)
        location = rng.randrange(big_n)
        candidates = set(rng.sample(range(n), rng.randint(1, n)))
        vectors = get_voting_vector(candidates, location, n, big_n)

        bits = set_bits(vectors.forward_vector)
        assert bits
        assert all(location * n <= b < (location + 1) * n for b in bits)
        assert vectors.forward_vector.bit_length() <= n * big_n
        assert vectors.reverse_vector.bit_length() <= n * big_n

def test_reverse_occupies_mirrored_slot():
    rng = random.Random(7)
    for _ in range(200):
        n = rng.randint(1, 8)
        big_n = rng.randint(1, 40)
        location = rng.randrange(big_n)
        candidates = set(rng.sample(range(n), rng.randint(1, n)))
        reverse = get_voting_vector(candidates, location, n, big_n).reverse_vector

        total = n * big_n
        bits = set_bits(reverse)
        assert all(total - (location + 1) * n <= b < total - location * n for b in bits)

def test_reverse_mirroring_symmetry():
    # Candidat c en position L (avant) et candidat n-1-c en position N-1-L
    # (arrière) doivent tomber sur le même bit
    rng = random.Random(2017)
    for _ in range(300):
        n = rng.randint(1, 10)
        big_n = rng.randint(1, 50)
        c = rng.randrange(n)
        location = rng.randrange(big_n)

        forward = get_voting_vector({c}, location, n, big_n).forward_vector
        reverse = get_voting_vector({n - 1 - c}, big_n - 1 - location, n, big_n).reverse_vector
        assert forward == reverse
        assert set_bits(forward) == [location * n + c]

def test_reverse_is_bit_reversal_of_forward():
    n, big_n = 5, 7
    total = n * big_n
    vectors = get_voting_vector({1, 3, 4}, 2, n, big_n)
    forward_bits = format(vectors.forward_vector, f"0{total}b")
    reverse_bits = format(vectors.reverse_vector, f"0{total}b")
    assert forward_bits == reverse_bits[::-1]

def test_large_field_no_truncation():
    n, big_n = 5, 1000
    vectors = get_voting_vector({4}, big_n - 1, n, big_n)
    assert vectors.forward_vector == 1 << (n * big_n - 1)
    assert vectors.reverse_vector == 1
    vectors = get_voting_vector({0}, 0, n, big_n)
    assert vectors.forward_vector == 1
    assert vectors.reverse_vector == 1 << (n * big_n - 1)

def test_invalid_inputs():
    with pytest.raises(InvalidSelectionError):
        get_voting_vector({2}, 0, 2, 3)
    with pytest.raises(InvalidSelectionError):
        get_voting_vector([1, 1], 0, 2, 3)
    with pytest.raises(InvalidSelectionError):
        get_voting_vector({-1}, 0, 2, 3)
    with pytest.raises(InvalidParametersError):
        get_voting_vector({0}, 3, 2, 3)
    with pytest.raises(InvalidParametersError):
        get_voting_vector({0}, -1, 2, 3)
    with pytest.raises(InvalidParametersError):
        get_voting_vector({0}, 0, 0, 3)
    with pytest.raises(InvalidParametersError):
        get_voting_vector({0}, 0, 2, 0)

def test_check_selection_policy():
    check_selection({1}, 3)
    with pytest.raises(InvalidSelectionError):
        check_selection({0, 1}, 3)
    with pytest.raises(InvalidSelectionError):
        check_selection(set(), 3)

    # Le mode triche accepte plusieurs candidats, ou aucun
    check_selection({0, 1, 2}, 3, cheat_mode=True)
    check_selection(set(), 3, cheat_mode=True)
    with pytest.raises(InvalidSelectionError):
        check_selection({3}, 3, cheat_mode=True)
