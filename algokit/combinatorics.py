"""Counting modulo 1e9+7: Catalan numbers, derangements, multinomials, inclusion-exclusion."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable
from itertools import accumulate, combinations

MOD = 1_000_000_007


def modular_inverse(value: int) -> int:
    """Multiplicative inverse of value modulo MOD."""
    if value % MOD == 0:
        raise ValueError("zero has no modular inverse")
    return pow(value, -1, MOD)


def _factorials(limit: int) -> list[int]:
    """Factorials 0!..limit! modulo MOD."""
    return list(accumulate(range(1, limit + 1), lambda acc, i: acc * i % MOD, initial=1))


def bracket_sequences(n: int) -> int:
    """Number of valid bracket sequences of length n."""
    if n < 0:
        raise ValueError("length must not be negative")
    if n % 2:
        return 0
    half = n // 2
    factorial = _factorials(n)
    denominator = factorial[half] * factorial[half] % MOD * (half + 1) % MOD
    return factorial[n] * modular_inverse(denominator) % MOD


def derangements(n: int) -> int:
    """Ways to give n children gifts so that nobody gets their own."""
    if n < 1:
        raise ValueError("need at least one child")
    previous, current = 1, 0
    for i in range(2, n + 1):
        previous, current = current, (i - 1) * (current + previous) % MOD
    return current


def creating_strings(text: str) -> int:
    """Number of distinct strings that are rearrangements of text."""
    factorial = _factorials(len(text))
    result = factorial[len(text)]
    for count in Counter(text).values():
        result = result * modular_inverse(factorial[count]) % MOD
    return result


def distributing_apples(children: int, apples: int) -> int:
    """Ways to share the apples among the children."""
    if children < 1:
        raise ValueError("need at least one child")
    if apples < 0:
        raise ValueError("apples must not be negative")
    factorial = _factorials(children + apples - 1)
    denominator = factorial[children - 1] * factorial[apples] % MOD
    return factorial[children + apples - 1] * modular_inverse(denominator) % MOD


def prime_multiples(n: int, primes: Iterable[int]) -> int:
    """Count of numbers in 1..n divisible by at least one of the primes."""
    chosen = list(primes)
    if any(p < 1 for p in chosen):
        raise ValueError("primes must be positive")
    total = 0
    for size in range(1, len(chosen) + 1):
        sign = 1 if size % 2 else -1
        for group in combinations(chosen, size):
            product = 1
            for p in group:
                product *= p
                if product > n:
                    break
            total += sign * (n // product)
    return total


def dice_probability(n: int, a: int, b: int) -> float:
    """Probability that the sum of n dice lies in [a, b], rounded to six decimals."""
    if n < 1:
        raise ValueError("need at least one die")
    distribution = [1.0]
    for _ in range(n):
        distribution = [
            sum(distribution[max(0, j - 6) : j]) / 6.0 for j in range(len(distribution) + 6)
        ]
    low = max(a, 0)
    result = sum(distribution[low : b + 1]) if b >= low else 0.0
    return math.floor(result * 1e6 + 0.5) / 1e6