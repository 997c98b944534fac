import random

import pytest

from cpalgo.affine import AffineMod


def test_identity_is_neutral():
    f = AffineMod(12345, 678)
    e = AffineMod.identity()
    assert e + f == f
    assert f + e == f
    assert e.eval(42) == 42


def test_composition_applies_left_first():
    rng = random.Random(3)
    mod = 998244353
    for _ in range(100):
        f = AffineMod(rng.randrange(mod), rng.randrange(mod))
        g = AffineMod(rng.randrange(mod), rng.randrange(mod))
        x = rng.randrange(mod)
        assert (f + g).eval(x) == g.eval(f.eval(x))


def test_associativity():
    rng = random.Random(4)
    maps = [AffineMod(rng.randrange(10**9), rng.randrange(10**9), 1000003) for _ in range(3)]
    f, g, h = maps
    assert (f + g) + h == f + (g + h)


def test_small_modulus_value():
    assert AffineMod(2, 3, 7).eval(5) == 6


def test_values_are_reduced():
    f = AffineMod(-1, 20, 7)
    assert (f.a, f.b) == (6, 6)


def test_mismatched_moduli():
    with pytest.raises(ValueError):
        AffineMod(1, 1, 7) + AffineMod(1, 1, 11)
    with pytest.raises(ValueError):
        AffineMod(1, 1, 0)