import pytest

from cpalgo.csr import CsrArray


def test_construct_groups_rows_in_order():
    items = [(0, "a"), (2, "b"), (0, "c"), (2, "d")]
    csr = CsrArray.construct(3, items)
    assert len(csr) == 3
    assert csr.full_size() == len(items)
    assert csr[0] == ["a", "c"]
    assert csr[1] == []
    assert csr[2] == ["b", "d"]


def test_iteration_covers_all_rows():
    items = [(i % 4, i) for i in range(20)]
    csr = CsrArray.construct(4, items)
    rows = list(csr)
    assert len(rows) == 4
    assert sorted(v for row in rows for v in row) == list(range(20))
    for r, row in enumerate(rows):
        assert all(v % 4 == r for v in row)
        assert row == sorted(row)


def test_raw_layout():
    csr = CsrArray([1, 2, 3], [0, 2, 2, 3])
    assert len(csr) == 3
    assert csr[0] == [1, 2]
    assert csr[1] == []
    assert csr[2] == [3]


def test_bad_positions():
    with pytest.raises(ValueError):
        CsrArray([1, 2], [0, 1])
    with pytest.raises(ValueError):
        CsrArray([1, 2], [0, 2, 1, 2])
    with pytest.raises(ValueError):
        CsrArray([], [])


def test_out_of_range_access():
    csr = CsrArray.construct(2, [(1, 5)])
    with pytest.raises(IndexError):
        csr[2]
    with pytest.raises(IndexError):
        CsrArray.construct(2, [(3, 1)])