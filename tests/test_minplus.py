import random

import pytest

from cpalgo.minplus import min_plus_convolution_concave_a, min_plus_convolution_convex_a

INF = 2002002002


def _brute(a, b):
    return [
        min(a[i] + b[k - i] for i in range(len(a)) if 0 <= k - i < len(b))
        for k in range(len(a) + len(b) - 1)
    ]


def _shaped(rng, n, convex):
    diffs = sorted((rng.randint(-1000, 1000) for _ in range(n - 1)), reverse=not convex)
    values = [rng.randint(-10**5, 10**5)]
    for dlt in diffs:
        values.append(values[-1] + dlt)
    return values


def _check_result(a, b, res):
    assert len(res) == len(a) + len(b) - 1
    assert [v for v, _ in res] == _brute(a, b)
    for k, (v, i) in enumerate(res):
        assert 0 <= i < len(a) and 0 <= k - i < len(b)
        assert a[i] + b[k - i] == v


@pytest.mark.parametrize("seed", range(40))
def test_concave_random(seed):
    rng = random.Random(seed)
    n, m = rng.randint(1, 12), rng.randint(1, 25)
    a = _shaped(rng, n, convex=False)
    b = [rng.randint(-10**5, 10**5) for _ in range(m)]
    _check_result(a, b, min_plus_convolution_concave_a(a, b, INF))


@pytest.mark.parametrize("seed", range(40))
def test_convex_random(seed):
    rng = random.Random(1000 + seed)
    n, m = rng.randint(1, 25), rng.randint(1, 12)
    a = _shaped(rng, n, convex=True)
    b = [rng.randint(-10**5, 10**5) for _ in range(m)]
    _check_result(a, b, min_plus_convolution_convex_a(a, b, INF))


def test_single_elements():
    assert min_plus_convolution_concave_a([3], [4], INF) == [(7, 0)]
    assert min_plus_convolution_convex_a([3], [4], INF) == [(7, 0)]


def test_empty_inputs_rejected():
    with pytest.raises(ValueError):
        min_plus_convolution_concave_a([], [1], INF)
    with pytest.raises(ValueError):
        min_plus_convolution_convex_a([1], [], INF)