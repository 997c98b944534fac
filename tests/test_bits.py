import random

import pytest

from cpalgo.bits import lsb_index, msb_index, popcount


def test_popcount_extremes():
    assert popcount(0) == 0
    assert popcount((1 << 64) - 1) == 64
    assert popcount(-1) == 64


@pytest.mark.parametrize("k", range(64))
def test_single_bit(k):
    x = 1 << k
    assert popcount(x) == 1
    assert msb_index(x) == k
    assert lsb_index(x) == k


def test_popcount_recurrence():
    rng = random.Random(1)
    for _ in range(500):
        x = rng.getrandbits(64)
        assert popcount(x) == popcount(x >> 1) + (x & 1)


def test_msb_and_lsb_bounds():
    rng = random.Random(2)
    for _ in range(500):
        x = rng.getrandbits(64) or 1
        m = msb_index(x)
        assert (1 << m) <= x < (2 << m)
        low = lsb_index(x)
        assert (x >> low) & 1 == 1
        assert x & ((1 << low) - 1) == 0
        assert low <= m


def test_zero_is_rejected():
    with pytest.raises(ValueError):
        msb_index(0)
    with pytest.raises(ValueError):
        lsb_index(0)