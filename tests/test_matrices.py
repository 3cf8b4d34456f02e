import pytest

from algokit.combinatorics import MOD
from algokit.matrices import (
    fibonacci,
    graph_paths,
    matrix_multiply,
    matrix_power,
    throwing_dice,
)

SAMPLE = [[1, 2, 0], [3, 4, 5], [0, 6, 7]]
IDENTITY = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]


def test_multiply_by_identity():
    assert matrix_multiply(SAMPLE, IDENTITY) == SAMPLE
    assert matrix_multiply(IDENTITY, SAMPLE) == SAMPLE


def test_multiply_is_associative():
    other = [[2, 0, 1], [1, 1, 1], [5, 0, 3]]
    assert matrix_multiply(matrix_multiply(SAMPLE, other), SAMPLE) == matrix_multiply(
        SAMPLE, matrix_multiply(other, SAMPLE)
    )


def test_multiply_rectangular_shape():
    product = matrix_multiply([[1, 2, 3]], [[1], [1], [1]])
    assert product == [[6]]


def test_multiply_dimension_mismatch():
    with pytest.raises(ValueError):
        matrix_multiply([[1, 2]], [[1, 2]])


def test_power_zero_is_identity():
    assert matrix_power(SAMPLE, 0) == IDENTITY


def test_power_adds_exponents():
    assert matrix_power(SAMPLE, 13) == matrix_multiply(matrix_power(SAMPLE, 5), matrix_power(SAMPLE, 8))


def test_power_rejects_non_square():
    with pytest.raises(ValueError):
        matrix_power([[1, 2]], 3)


def test_fibonacci_start_and_example():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1
    assert fibonacci(10) == 55


def test_fibonacci_recurrence():
    for n in range(2, 60):
        assert fibonacci(n) == (fibonacci(n - 1) + fibonacci(n - 2)) % MOD


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_graph_paths_chain():
    edges = [(1, 2), (2, 3)]
    assert graph_paths(3, edges, 2) == 1
    assert graph_paths(3, edges, 1) == 0
    assert graph_paths(3, edges, 3) == 0


def test_graph_paths_counts_parallel_edges():
    edges = [(1, 2)] * 4
    assert graph_paths(2, edges, 1) == len(edges)


def test_graph_paths_zero_steps_single_node():
    assert graph_paths(1, [], 0) == 1


def test_graph_paths_bad_edge():
    with pytest.raises(IndexError):
        graph_paths(2, [(1, 3)], 1)


def test_throwing_dice_small():
    assert throwing_dice(0) == 1
    assert [throwing_dice(n) for n in range(1, 7)] == [2 ** (n - 1) for n in range(1, 7)]


def test_throwing_dice_recurrence():
    for n in range(7, 40):
        assert throwing_dice(n) == sum(throwing_dice(n - face) for face in range(1, 7)) % MOD