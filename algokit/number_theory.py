"""Modular powers, divisor counts, largest common divisors and the Josephus order."""

from __future__ import annotations

from collections.abc import Iterable

from algokit.combinatorics import MOD


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """base ** exponent modulo modulus."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    return pow(base, exponent, modulus)


def exponentiation(a: int, b: int) -> int:
    """a ** b modulo 1e9+7."""
    return power_mod(a, b, MOD)


def exponentiation_ii(a: int, b: int, c: int) -> int:
    """a ** (b ** c) modulo 1e9+7, reducing the exponent by Fermat's little theorem."""
    return power_mod(a, power_mod(b, c, MOD - 1), MOD)


def common_divisors(values: Iterable[int]) -> int:
    """Largest greatest common divisor of any two of the values."""
    items = list(values)
    if len(items) < 2:
        raise ValueError("need at least two values")
    if any(v < 1 for v in items):
        raise ValueError("values must be positive")
    limit = max(items)
    counts = [0] * (limit + 1)
    for value in items:
        counts[value] += 1
    for divisor in range(limit, 0, -1):
        if sum(counts[divisor::divisor]) > 1:
            return divisor
    raise AssertionError("unreachable: 1 divides every pair")


def divisor_count_table(limit: int) -> list[int]:
    """table[x] is the number of divisors of x for 1 <= x <= limit; table[0] is 0."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    table = [0] * (limit + 1)
    for divisor in range(1, limit + 1):
        for multiple in range(divisor, limit + 1, divisor):
            table[multiple] += 1
    return table


def counting_divisors(values: Iterable[int]) -> list[int]:
    """Number of divisors of each value."""
    items = list(values)
    if not items:
        return []
    if any(v < 1 for v in items):
        raise ValueError("values must be positive")
    table = divisor_count_table(max(items))
    return [table[v] for v in items]


def josephus(n: int, k: int) -> int:
    """The k-th child removed when every second of n children in a circle leaves."""
    if not 1 <= k <= n:
        raise ValueError(f"k must lie in 1..{n}")
    if n == 1:
        return 1
    half = (n + 1) // 2
    if k <= half:
        return 2 * k % n if 2 * k > n else 2 * k
    rest = josephus(n // 2, k - half)
    return 2 * rest + 1 if n % 2 else 2 * rest - 1