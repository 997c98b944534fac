import random
from math import gcd

import pytest

from cpalgo.divisor import (
    divisor_mobius,
    divisor_reversed_mobius,
    divisor_reversed_zeta,
    divisor_zeta,
    gcd_convolution,
    lcm_convolution,
    sum_for_coprime_index,
)


def _random_list(n, seed, top=1000):
    rng = random.Random(seed)
    return [0] + [rng.randint(0, top) for _ in range(n)]


def test_zeta_sums_over_divisors():
    a = _random_list(40, 1)
    z = list(a)
    divisor_zeta(z)
    for k in range(1, len(a)):
        assert z[k] == sum(a[d] for d in range(1, k + 1) if k % d == 0)


def test_reversed_zeta_sums_over_multiples():
    a = _random_list(40, 2)
    z = list(a)
    divisor_reversed_zeta(z)
    n = len(a) - 1
    for k in range(1, n + 1):
        assert z[k] == sum(a[m] for m in range(k, n + 1, k))


@pytest.mark.parametrize(
    "forward,backward",
    [(divisor_zeta, divisor_mobius), (divisor_reversed_zeta, divisor_reversed_mobius)],
)
def test_transforms_round_trip(forward, backward):
    a = _random_list(100, 3)
    b = list(a)
    forward(b)
    backward(b)
    assert b == a


def test_gcd_convolution_matches_definition():
    n = 30
    a, b = _random_list(n, 4), _random_list(n, 5)
    c = gcd_convolution(a, b)
    for k in range(1, n + 1):
        expect = sum(a[i] * b[j] for i in range(1, n + 1) for j in range(1, n + 1) if gcd(i, j) == k)
        assert c[k] == expect


def test_lcm_convolution_matches_definition():
    n = 30
    a, b = _random_list(n, 6), _random_list(n, 7)
    c = lcm_convolution(a, b)
    for k in range(1, n + 1):
        expect = sum(
            a[i] * b[j]
            for i in range(1, n + 1)
            for j in range(1, n + 1)
            if i * j // gcd(i, j) == k
        )
        assert c[k] == expect


def test_convolutions_with_modulus():
    mod = 998244353
    n = 25
    a, b = _random_list(n, 8, mod - 1), _random_list(n, 9, mod - 1)
    plain_g = gcd_convolution(a, b)
    plain_l = lcm_convolution(a, b)
    assert gcd_convolution(a, b, mod)[1:] == [x % mod for x in plain_g[1:]]
    assert lcm_convolution(a, b, mod)[1:] == [x % mod for x in plain_l[1:]]


def test_convolution_inputs_untouched():
    a, b = _random_list(10, 10), _random_list(10, 11)
    a0, b0 = list(a), list(b)
    gcd_convolution(a, b)
    assert (a, b) == (a0, b0)


def test_convolution_errors():
    with pytest.raises(ValueError):
        gcd_convolution([0, 1], [0, 1, 2])
    with pytest.raises(ValueError):
        lcm_convolution([], [])


@pytest.mark.parametrize("seed", range(3))
def test_sum_for_coprime_index(seed):
    rng = random.Random(seed)
    n = rng.randint(100, 300)
    a = [0] + [rng.getrandbits(64) for _ in range(n - 1)]
    expect = [0] * n
    for i in range(1, n):
        expect[i] = sum(a[j] for j in range(1, n) if gcd(i, j) == 1)
    sum_for_coprime_index(a)
    assert a[1:] == expect[1:]


def test_sum_for_coprime_index_small_sizes():
    empty = []
    sum_for_coprime_index(empty)
    assert empty == []
    single = [5]
    sum_for_coprime_index(single)
    assert single == [5]