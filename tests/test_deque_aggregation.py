import collections
import functools
import random

import pytest

from cpalgo.affine import AffineMod
from cpalgo.deque_aggregation import DequeAggregation


def test_string_order():
    dq = DequeAggregation("")
    dq.push_back("a")
    dq.push_back("b")
    dq.push_front("z")
    assert dq.fold() == "zab"
    assert dq.pop_back() == "b"
    assert dq.pop_back() == "a"
    assert dq.fold() == "z"


def test_empty():
    dq = DequeAggregation(0)
    assert dq.fold() == 0
    assert len(dq) == 0
    with pytest.raises(IndexError):
        dq.pop_front()
    with pytest.raises(IndexError):
        dq.pop_back()


def test_deque_composite_against_list():
    rng = random.Random(21)
    mod = 998244353
    dq = DequeAggregation(AffineMod.identity())
    model = collections.deque()
    for _ in range(2000):
        t = rng.randrange(5)
        if t == 0:
            f = AffineMod(rng.randrange(1, mod), rng.randrange(mod))
            dq.push_front(f)
            model.appendleft(f)
        elif t == 1:
            f = AffineMod(rng.randrange(1, mod), rng.randrange(mod))
            dq.push_back(f)
            model.append(f)
        elif t == 2 and model:
            assert dq.pop_front() == model.popleft()
        elif t == 3 and model:
            assert dq.pop_back() == model.pop()
        else:
            x = rng.randrange(mod)
            expected = functools.reduce(lambda acc, g: g.eval(acc), model, x)
            assert dq.fold().eval(x) == expected
        assert len(dq) == len(model)


def test_queue_usage():
    dq = DequeAggregation("")
    for ch in "hello":
        dq.push_back(ch)
    assert dq.pop_front() == "h"
    dq.push_back("!")
    assert dq.fold() == "ello!"