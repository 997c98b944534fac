import random
from math import factorial

import pytest

from cpalgo.sps import sps_power_projection

MOD = 998244353


def _subset_conv(f, g):
    size = len(f)
    out = [0] * size
    for s in range(size):
        t = s
        while True:
            out[s] = (out[s] + f[t] * g[s ^ t]) % MOD
            if t == 0:
                break
            t = (t - 1) & s
    return out


def _naive(n, a, w, m):
    size = 1 << n
    power = [1] + [0] * (size - 1)
    res = []
    for _ in range(m):
        res.append(sum(x * y for x, y in zip(w, power)) % MOD)
        power = _subset_conv(power, a)
    return res


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4])
@pytest.mark.parametrize("zero_constant", [True, False])
def test_matches_naive_projection(n, zero_constant):
    rng = random.Random(n * 10 + zero_constant)
    size = 1 << n
    a = [rng.randrange(MOD) for _ in range(size)]
    if zero_constant:
        a[0] = 0
    w = [rng.randrange(MOD) for _ in range(size)]
    m = n + 4
    assert sps_power_projection(n, a, w, m) == _naive(n, a, w, m)


def test_exponential_divides_by_factorial():
    rng = random.Random(7)
    n = 3
    a = [0] + [rng.randrange(MOD) for _ in range((1 << n) - 1)]
    w = [rng.randrange(MOD) for _ in range(1 << n)]
    plain = sps_power_projection(n, a, w, 6)
    expo = sps_power_projection(n, a, w, 6, exponential=True)
    assert [x * factorial(k) % MOD for k, x in enumerate(expo)] == plain


def test_zero_length_output():
    assert sps_power_projection(2, [0, 1, 2, 3], [1, 1, 1, 1], 0) == []


def test_single_point_constant_powers():
    assert sps_power_projection(0, [3], [5], 3) == [5, 15, 45]


def test_short_input_raises():
    with pytest.raises(ValueError):
        sps_power_projection(2, [1, 2, 3], [1, 2, 3, 4], 2)


def test_negative_m_raises():
    with pytest.raises(ValueError):
        sps_power_projection(1, [0, 1], [1, 1], -1)