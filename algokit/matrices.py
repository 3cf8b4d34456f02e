"""Matrix powers modulo 1e9+7: Fibonacci numbers, walk counts and dice sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from algokit.combinatorics import MOD

Matrix = list[list[int]]


def matrix_multiply(left: Sequence[Sequence[int]], right: Sequence[Sequence[int]]) -> Matrix:
    """Product of two matrices modulo MOD."""
    if any(len(row) != len(right) for row in left):
        raise ValueError("inner dimensions do not match")
    columns = list(zip(*right))
    return [[sum(a * b for a, b in zip(row, column)) % MOD for column in columns] for row in left]


def matrix_power(matrix: Sequence[Sequence[int]], exponent: int) -> Matrix:
    """matrix ** exponent modulo MOD for a square matrix."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = [[int(i == j) for j in range(size)] for i in range(size)]
    base = [[value % MOD for value in row] for row in matrix]
    while exponent:
        if exponent & 1:
            result = matrix_multiply(result, base)
        base = matrix_multiply(base, base)
        exponent //= 2
    return result


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number modulo MOD."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n < 2:
        return n
    return matrix_power([[0, 1], [1, 1]], n)[0][1]


def graph_paths(n: int, edges: Iterable[tuple[int, int]], k: int) -> int:
    """Walks of exactly k edges from node 1 to node n in a directed multigraph."""
    if n < 1:
        raise ValueError("need at least one node")
    adjacency = [[0] * n for _ in range(n)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise IndexError(f"edge ({a}, {b}) outside 1..{n}")
        adjacency[a - 1][b - 1] += 1
    return matrix_power(adjacency, k)[0][n - 1]


_DICE_STEP = [[1, 1, 1, 1, 1, 1]] + [[int(j == i) for j in range(6)] for i in range(5)]


def throwing_dice(n: int) -> int:
    """Ways to reach sum n by throwing a die one or more times, in order."""
    return matrix_power(_DICE_STEP, n)[0][0]