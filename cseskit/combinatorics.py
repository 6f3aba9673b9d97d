"""Modular combinatorics: factorials, binomials, powers and bracket counts."""

from __future__ import annotations

import math
from collections import Counter
from itertools import accumulate

MOD = 10**9 + 7


class FactorialTable:
    """Factorials and inverse factorials modulo ``MOD`` for 0..limit."""

    def __init__(self, limit: int) -> None:
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        self.limit = limit
        self._fact = list(
            accumulate(range(1, limit + 1), lambda acc, i: acc * i % MOD, initial=1)
        )
        inverse = [0] * (limit + 1)
        inverse[limit] = pow(self._fact[limit], MOD - 2, MOD)
        for i in range(limit, 0, -1):
            inverse[i - 1] = inverse[i] * i % MOD
        self._inv_fact = inverse

    def _check(self, n: int) -> None:
        if not 0 <= n <= self.limit:
            raise ValueError(f"{n} is outside the table range 0..{self.limit}")

    def _factorial(self, n: int) -> int:
        self._check(n)
        return self._fact[n]

    def _inverse_factorial(self, n: int) -> int:
        self._check(n)
        return self._inv_fact[n]

    def binomial(self, a: int, b: int) -> int:
        """Return C(a, b) modulo ``MOD``; zero when ``b`` lies outside 0..a."""
        self._check(a)
        if b < 0 or b > a:
            return 0
        return self._fact[a] * self._inv_fact[b] % MOD * self._inv_fact[a - b] % MOD


def binomial_coefficient(a: int, b: int) -> int:
    """Return C(a, b) modulo ``MOD``."""
    if a < 0:
        raise ValueError(f"a must be non-negative, got {a}")
    if b < 0 or b > a:
        return 0
    return math.comb(a, b) % MOD


def exponentiation(a: int, b: int) -> int:
    """Return a to the power b modulo ``MOD``."""
    if b < 0:
        raise ValueError(f"exponent must be non-negative, got {b}")
    return pow(a, b, MOD)


def tower_exponentiation(a: int, b: int, c: int) -> int:
    """Return a^(b^c) modulo ``MOD``, reducing the exponent by Fermat's little theorem."""
    if b < 0 or c < 0:
        raise ValueError("exponents must be non-negative")
    return pow(a, pow(b, c, MOD - 1), MOD)


def distinct_arrangements(text: str) -> int:
    """Count the distinct strings formed by reordering ``text``, modulo ``MOD``."""
    table = FactorialTable(len(text))
    result = table._factorial(len(text))
    for count in Counter(text).values():
        result = result * table._inverse_factorial(count) % MOD
    return result


def distribute_apples(children: int, apples: int) -> int:
    """Count the ways to share ``apples`` identical apples among ``children``."""
    if children < 0 or apples < 0:
        raise ValueError("children and apples must be non-negative")
    if children == 0:
        return 1 if apples == 0 else 0
    return binomial_coefficient(children + apples - 1, apples)


def derangements(n: int) -> int:
    """Count permutations of n items with no fixed point, modulo ``MOD``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    previous, current = 1, 0
    if n == 0:
        return previous
    for size in range(2, n + 1):
        previous, current = current, (size - 1) * (current + previous) % MOD
    return current


def bracket_sequences(n: int) -> int:
    """Count valid bracket sequences of length ``n``, modulo ``MOD``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n % 2:
        return 0
    half = n // 2
    table = FactorialTable(n)
    return (table.binomial(n, half) - table.binomial(n, half + 1)) % MOD


def bracket_completions(n: int, prefix: str) -> int:
    """Count valid bracket sequences of length ``n`` that start with ``prefix``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    invalid = set(prefix) - {"(", ")"}
    if invalid:
        raise ValueError(f"prefix holds characters other than brackets: {sorted(invalid)}")
    balances = accumulate(1 if ch == "(" else -1 for ch in prefix)
    if any(balance < 0 for balance in balances):
        return 0
    opens = prefix.count("(")
    closes = len(prefix) - opens
    if n % 2 or opens > n // 2:
        return 0
    open_left = n // 2 - opens
    close_left = n // 2 - closes
    total = open_left + close_left
    table = FactorialTable(total)
    return (table.binomial(total, open_left) - table.binomial(total, close_left + 1)) % MOD