import itertools

import pytest

from boggleht.mt19937 import MT19937


def test_first_output_of_default_seed():
    assert MT19937(5489)() == 3499211612


def test_ten_thousandth_output_of_default_seed():
    gen = MT19937()
    value = None
    for _ in range(10000):
        value = gen()
    assert value == 4123659995


def test_same_seed_same_sequence():
    a = MT19937(42)
    b = MT19937(42)
    assert [a() for _ in range(1000)] == [b() for _ in range(1000)]


def test_different_seeds_differ():
    a = [MT19937(1)() for _ in range(1)]
    b = [MT19937(2)() for _ in range(1)]
    seq_a = list(itertools.islice(MT19937(1), 10))
    seq_b = list(itertools.islice(MT19937(2), 10))
    assert seq_a != seq_b
    assert a == seq_a[:1]
    assert b == seq_b[:1]


@pytest.mark.parametrize("seed", [0, 1, 12345, 2**32 - 1])
def test_outputs_are_32_bit(seed):
    gen = MT19937(seed)
    values = [gen() for _ in range(1500)]
    assert all(0 <= v <= MT19937.max for v in values)
    assert MT19937.max == 2**32 - 1


def test_negative_seed_wraps_to_unsigned():
    a = MT19937(-1)
    b = MT19937(2**32 - 1)
    assert [a() for _ in range(20)] == [b() for _ in range(20)]


def test_seed_is_truncated_to_32_bits():
    a = MT19937(2**32 + 7)
    b = MT19937(7)
    assert [a() for _ in range(20)] == [b() for _ in range(20)]


def test_iteration_matches_calls():
    a = MT19937(99)
    b = MT19937(99)
    assert list(itertools.islice(a, 700)) == [b() for _ in range(700)]