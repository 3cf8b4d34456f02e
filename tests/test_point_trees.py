import random

import pytest

from algokit.point_trees import (
    MinTree,
    RangeAddTree,
    SumTree,
    dynamic_range_minimums,
    dynamic_range_sums,
    range_update_queries,
)


def _values(seed, n):
    rng = random.Random(seed)
    return [rng.randint(-100, 100) for _ in range(n)]


@pytest.mark.parametrize("n", [1, 5, 8, 13])
def test_sum_tree_tracks_assignments(n):
    rng = random.Random(n)
    model = _values(n, n)
    tree = SumTree(model)
    for _ in range(60):
        index = rng.randrange(n)
        value = rng.randint(-100, 100)
        tree.set(index, value)
        model[index] = value
        left = rng.randrange(n + 1)
        right = rng.randrange(left, n + 1)
        assert tree.sum(left, right) == sum(model[left:right])


def test_sum_tree_empty_range_is_zero():
    tree = SumTree([4, 5, 6])
    assert tree.sum(2, 2) == 0
    assert len(tree) == 3


@pytest.mark.parametrize("n", [1, 6, 9])
def test_min_tree_tracks_assignments(n):
    rng = random.Random(100 + n)
    model = _values(n, n)
    tree = MinTree(model)
    for _ in range(60):
        index = rng.randrange(n)
        value = rng.randint(-100, 100)
        tree.set(index, value)
        model[index] = value
        left = rng.randrange(n)
        right = rng.randrange(left + 1, n + 1)
        assert tree.min(left, right) == min(model[left:right])


def test_min_tree_rejects_empty_and_outside():
    tree = MinTree([3, 1, 2])
    with pytest.raises(ValueError):
        tree.min(1, 1)
    with pytest.raises(IndexError):
        tree.min(0, 4)
    with pytest.raises(IndexError):
        tree.set(3, 0)


def test_range_add_tree_matches_model():
    rng = random.Random(21)
    model = _values(21, 11)
    tree = RangeAddTree(model)
    for _ in range(50):
        left = rng.randrange(12)
        right = rng.randrange(left, 12)
        value = rng.randint(-20, 20)
        tree.add(left, right, value)
        for i in range(left, right):
            model[i] += value
        assert [tree.get(i) for i in range(len(model))] == model


def test_range_add_tree_rejects_outside():
    tree = RangeAddTree([1, 2])
    with pytest.raises(IndexError):
        tree.get(2)
    with pytest.raises(IndexError):
        tree.add(1, 3, 5)


def test_dynamic_range_sums_driver():
    values = [3, 2, 4, 5, 1, 1, 5, 3]
    operations = [(2, 1, 4), (2, 5, 6), (1, 3, 1), (2, 1, 4)]
    result = dynamic_range_sums(values, operations)
    assert result == [sum(values[0:4]), sum(values[4:6]), sum(values[0:4]) - 3]


def test_dynamic_range_minimums_driver():
    values = [3, 2, 4, 5, 1, 1, 5, 3]
    operations = [(2, 1, 4), (2, 5, 6), (1, 2, 3), (2, 1, 4)]
    assert dynamic_range_minimums(values, operations) == [2, 1, 3]


def test_range_update_queries_driver():
    values = [3, 2, 4, 5, 1, 1, 5, 3]
    operations = [(2, 4), (1, 2, 5, 1), (2, 4), (2, 1)]
    assert range_update_queries(values, operations) == [5, 6, 3]