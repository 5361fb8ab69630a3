import pytest

from algocraft.data_structures.disjoint_set import DisjointSet


def test_create_large_set():
    ds = DisjointSet(10**6)
    assert len(ds) == 10**6
    assert ds.find(10**6 - 1) == 10**6 - 1


def test_initial_state():
    ds = DisjointSet(20)
    for element in range(len(ds)):
        assert ds.find(element) == element


def test_out_of_range_raises():
    ds = DisjointSet(4)
    with pytest.raises(IndexError):
        ds.find(4)
    with pytest.raises(IndexError):
        ds.find(-1)
    with pytest.raises(IndexError):
        ds.join(0, 7)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        DisjointSet(-1)


@pytest.fixture
def joined():
    ds = DisjointSet(16)
    ds.join(0, 8)
    ds.join(3, 15)
    ds.join(10, 5)
    return ds


def test_initial_joins(joined):
    assert joined.find(0) == 0
    assert joined.find(8) == 0
    assert joined.find(3) == 3
    assert joined.find(15) == 3
    assert joined.find(10) == 10
    assert joined.find(5) == 10


def test_joining_the_other_way_changes_nothing(joined):
    joined.join(8, 0)
    assert joined.find(0) == 0
    assert joined.find(8) == 0

    joined.join(15, 3)
    assert joined.find(3) == 3
    assert joined.find(15) == 3

    joined.join(5, 10)
    assert joined.find(10) == 10
    assert joined.find(5) == 10


def test_full_sequence(joined):
    ds = joined

    ds.join(8, 0)
    ds.join(15, 3)
    ds.join(5, 10)

    ds.join(0, 9)
    assert ds.find(9) == 0
    ds.join(3, 4)
    assert ds.find(4) == 3
    ds.join(10, 2)
    assert ds.find(2) == 10

    ds.join(1, 9)
    assert ds.find(1) == 0
    ds.join(6, 4)
    assert ds.find(6) == 3
    ds.join(7, 2)
    assert ds.find(7) == 10

    ds.join(11, 12)
    ds.join(12, 13)
    ds.join(13, 14)
    assert ds.find(11) == 11
    assert ds.find(12) == 11
    assert ds.find(13) == 11
    assert ds.find(14) == 11

    ds.join(9, 4)
    assert ds.find(9) == 0
    assert ds.find(4) == 0
    assert ds.find(3) == 0

    ds.join(12, 7)
    assert ds.find(12) == 11
    assert ds.find(7) == 11
    assert ds.find(10) == 11

    ds.join(13, 6)
    for element in range(len(ds)):
        assert ds.find(element) == 11


def test_long_chain_find_does_not_recurse_too_deep():
    n = 50_000
    ds = DisjointSet(n)
    for element in range(1, n):
        ds.join(element - 1, element)
    root = ds.find(0)
    assert all(ds.find(element) == root for element in range(n))