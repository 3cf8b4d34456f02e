import random

import pytest

from algokit.searches import CountTree, MaxTree, hotel_queries, list_removals


def test_hotel_worked_example():
    assert hotel_queries([3, 2, 4, 1, 5, 5, 2, 6], [4, 4, 7, 1, 1]) == [3, 5, 0, 1, 1]


def test_max_tree_first_at_least_matches_scan():
    rng = random.Random(3)
    model = [rng.randint(0, 30) for _ in range(13)]
    tree = MaxTree(model)
    for _ in range(80):
        target = rng.randint(1, 35)
        expected = next((i for i, v in enumerate(model) if v >= target), None)
        assert tree.first_at_least(target) == expected
        index = rng.randrange(len(model))
        delta = rng.randint(-5, 5)
        tree.add(index, delta)
        model[index] += delta


def test_max_tree_none_when_too_large():
    tree = MaxTree([1, 2, 3])
    assert tree.first_at_least(4) is None
    assert len(tree) == 3


def test_max_tree_add_rejects_outside():
    with pytest.raises(IndexError):
        MaxTree([1]).add(1, 1)


def test_hotel_rooms_never_go_negative():
    hotels = [5, 3, 8]
    groups = [4, 4, 4, 4, 4, 4]
    answers = hotel_queries(hotels, groups)
    used = [0, 0, 0]
    for rooms, hotel in zip(groups, answers):
        if hotel:
            used[hotel - 1] += rooms
    assert all(u <= h for u, h in zip(used, hotels))


def test_list_removals_worked_example():
    assert list_removals([2, 6, 1, 4, 2], [3, 1, 3, 1, 1]) == [1, 2, 2, 6, 4]


def test_list_removals_match_list_pop():
    rng = random.Random(9)
    values = list(range(100, 120))
    model = list(values)
    positions = []
    for remaining in range(len(values), 0, -1):
        positions.append(rng.randint(1, remaining))
    expected = [model.pop(p - 1) for p in positions]
    assert list_removals(values, positions) == expected


def test_count_tree_length_and_errors():
    tree = CountTree(4)
    tree.remove(tree.find_kth(2))
    assert len(tree) == 3
    assert tree.find_kth(2) == 2
    with pytest.raises(IndexError):
        tree.find_kth(4)
    with pytest.raises(IndexError):
        tree.find_kth(0)
    with pytest.raises(IndexError):
        tree.remove(4)
    with pytest.raises(ValueError):
        CountTree(-1)