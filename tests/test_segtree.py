import operator
import random

import pytest

from cpalgo.segtree import LazySegtree, Segtree


@pytest.mark.parametrize("n", [100, 137, 256])
def test_binary_search_on_ones(n):
    ds = Segtree(operator.add, 0, [1] * n)
    for i in range(n + 1):
        for j in range(n + 2):
            assert ds.min_left(i, lambda x: x <= j) == max(0, i - j)
            assert ds.max_right(i, lambda x: x <= j) == min(n, i + j)


def test_prod_matches_slices():
    rng = random.Random(5)
    values = [rng.randint(-50, 50) for _ in range(37)]
    ds = Segtree(operator.add, 0, values)
    for _ in range(200):
        if rng.random() < 0.3:
            p = rng.randrange(len(values))
            values[p] = rng.randint(-50, 50)
            ds.set(p, values[p])
        l = rng.randint(0, len(values))
        r = rng.randint(l, len(values))
        assert ds.prod(l, r) == sum(values[l:r])
    assert ds.all_prod() == sum(values)
    assert [ds.get(i) for i in range(len(values))] == values


def test_non_commutative_fold_order():
    ds = Segtree(operator.add, "", list("abcdef"))
    assert ds.prod(1, 4) == "bcd"
    ds.set(2, "X")
    assert ds.all_prod() == "abXdef"


def test_segtree_bounds():
    ds = Segtree(operator.add, 0, 4)
    assert ds.all_prod() == 0
    with pytest.raises(IndexError):
        ds.get(4)
    with pytest.raises(IndexError):
        ds.set(-1, 3)
    with pytest.raises(IndexError):
        ds.prod(0, 5)


def _sum_tree(values):
    return LazySegtree(
        lambda a, b: (a[0] + b[0], a[1] + b[1]),
        lambda f, g: f + g,
        lambda f, s: (s[0] + f * s[1], s[1]),
        (0, 0),
        0,
        [(v, 1) for v in values],
    )


@pytest.mark.parametrize("n", [100, 137])
def test_lazy_binary_search_on_ones(n):
    ds = _sum_tree([1] * n)
    for i in range(n + 1):
        for j in range(n + 2):
            assert ds.min_left(i, lambda x: x[0] <= j) == max(0, i - j)
            assert ds.max_right(i, lambda x: x[0] <= j) == min(n, i + j)


def test_lazy_range_add_range_sum():
    rng = random.Random(9)
    values = [rng.randint(0, 20) for _ in range(45)]
    ds = _sum_tree(values)
    for _ in range(300):
        l = rng.randint(0, len(values))
        r = rng.randint(l, len(values))
        op = rng.random()
        if op < 0.4:
            f = rng.randint(-5, 5)
            ds.apply_range(l, r, f)
            for k in range(l, r):
                values[k] += f
        elif op < 0.55 and l < len(values):
            f = rng.randint(-5, 5)
            ds.apply(l, f)
            values[l] += f
        elif op < 0.65 and l < len(values):
            ds.set(l, (7, 1))
            values[l] = 7
        else:
            assert ds.prod(l, r)[0] == sum(values[l:r])
    assert [ds.get(i)[0] for i in range(len(values))] == values
    assert ds.all_prod() == (sum(values), len(values))


def test_lazy_max_right_after_updates():
    rng = random.Random(11)
    values = [rng.randint(0, 5) for _ in range(30)]
    ds = _sum_tree(values)
    ds.apply_range(3, 20, 2)
    for k in range(3, 20):
        values[k] += 2
    for l in range(len(values) + 1):
        for bound in (0, 5, 17, 60):
            got = ds.max_right(l, lambda s: s[0] <= bound)
            assert sum(values[l:got]) <= bound
            if got < len(values):
                assert sum(values[l:got + 1]) > bound


def test_lazy_empty_range_is_identity():
    ds = _sum_tree([3, 4])
    assert ds.prod(2, 1) == (0, 0)
    with pytest.raises(IndexError):
        ds.get(2)