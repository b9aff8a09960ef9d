import random

import pytest

from algolab.segment_tree import SegmentTree

DATA = [1, 3, 5, 7, 9, 11]


def _all_ranges(n):
    return [(lo, hi) for lo in range(n) for hi in range(lo, n)]


def test_all_range_sums_match_slices():
    tree = SegmentTree(DATA)
    for lo, hi in _all_ranges(len(DATA)):
        assert tree.query(lo, hi) == sum(DATA[lo : hi + 1])


def test_update_changes_sums():
    tree = SegmentTree(DATA)
    before = tree.query(1, 3)
    tree.update(1, 10)
    assert tree.query(1, 3) == before - DATA[1] + 10
    assert tree.query(1, 1) == 10
    assert tree.query(0, 0) == DATA[0]


def test_random_updates_agree_with_list():
    rng = random.Random(7)
    values = [rng.randint(-20, 20) for _ in range(17)]
    tree = SegmentTree(values)
    for _ in range(50):
        pos = rng.randrange(len(values))
        values[pos] = rng.randint(-20, 20)
        tree.update(pos, values[pos])
        lo = rng.randrange(len(values))
        hi = rng.randrange(lo, len(values))
        assert tree.query(lo, hi) == sum(values[lo : hi + 1])


def test_single_element():
    tree = SegmentTree([42])
    assert tree.query(0, 0) == 42
    tree.update(0, -5)
    assert tree.query(0, 0) == -5


def test_empty_range_is_zero():
    tree = SegmentTree(DATA)
    assert tree.query(3, 2) == 0


def test_length():
    assert len(SegmentTree(DATA)) == len(DATA)


def test_empty_values_rejected():
    with pytest.raises(ValueError):
        SegmentTree([])


@pytest.mark.parametrize("left,right", [(-1, 2), (0, 6), (2, 10)])
def test_query_out_of_range(left, right):
    with pytest.raises(IndexError):
        SegmentTree(DATA).query(left, right)


@pytest.mark.parametrize("pos", [-1, 6])
def test_update_out_of_range(pos):
    with pytest.raises(IndexError):
        SegmentTree(DATA).update(pos, 1)