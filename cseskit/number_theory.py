"""Number theory: divisor sums and counts, nim, inclusion-exclusion, coprimality."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import combinations
from operator import xor

MOD = 10**9 + 7


def first_player_wins_nim(piles: Iterable[int]) -> bool:
    """Tell whether the first player wins nim on these piles."""
    return reduce(xor, piles, 0) != 0


def sum_of_divisors(n: int) -> int:
    """Return the sum of sigma(k) for k = 1..n, modulo ``MOD``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    total = 0
    low = 1
    while low <= n:
        quotient = n // low
        high = n // quotient
        total += quotient * (low + high) * (high - low + 1) // 2
        low = high + 1
    return total % MOD


def divisor_counts(limit: int) -> list[int]:
    """Return a list whose entry x is the number of divisors of x, for 0..limit."""
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    counts = [0] * (limit + 1)
    for divisor in range(1, limit + 1):
        for multiple in range(divisor, limit + 1, divisor):
            counts[multiple] += 1
    return counts


def prime_multiples(m: int, primes: Sequence[int]) -> int:
    """Count the numbers in 1..m divisible by at least one of ``primes``."""
    if any(p <= 0 for p in primes):
        raise ValueError("primes must be positive")
    result = 0
    for size in range(1, len(primes) + 1):
        sign = 1 if size % 2 else -1
        for subset in combinations(primes, size):
            product = 1
            for p in subset:
                product *= p
                if product > m:
                    break
            else:
                result += sign * (m // product)
    return result


def _mobius(limit: int) -> list[int]:
    mu = [1] * (limit + 1)
    composite = [False] * (limit + 1)
    for p in range(2, limit + 1):
        if composite[p]:
            continue
        for multiple in range(p, limit + 1, p):
            composite[multiple] = True
            mu[multiple] = -mu[multiple]
        for multiple in range(p * p, limit + 1, p * p):
            mu[multiple] = 0
    return mu


def coprime_pairs(values: Iterable[int]) -> int:
    """Count the pairs of positions whose values are coprime."""
    items = list(values)
    if any(v <= 0 for v in items):
        raise ValueError("values must be positive")
    if not items:
        return 0
    largest = max(items)
    freq = Counter(items)
    mu = _mobius(largest)
    result = 0
    for d in range(1, largest + 1):
        if mu[d] == 0:
            continue
        divisible = sum(freq[multiple] for multiple in range(d, largest + 1, d))
        result += mu[d] * divisible * (divisible - 1) // 2
    return result