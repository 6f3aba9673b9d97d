"""Counting and optimisation problems solved by dynamic programming."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 10**9 + 7

_DIE_FACES = range(1, 7)


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def dice_combinations(n: int) -> int:
    """Count the ordered sequences of die throws summing to ``n``, modulo ``MOD``."""
    _check_non_negative("n", n)
    ways = [1] + [0] * n
    for total in range(1, n + 1):
        ways[total] = sum(ways[total - face] for face in _DIE_FACES if face <= total) % MOD
    return ways[n]


def minimum_coins(coins: Iterable[int], target: int) -> int:
    """Return the fewest coins summing to ``target``, or -1 if it cannot be formed."""
    _check_non_negative("target", target)
    denominations = list(coins)
    unreachable = float("inf")
    best: list[float] = [0] + [unreachable] * target
    for total in range(1, target + 1):
        best[total] = min(
            (best[total - coin] + 1 for coin in denominations if 0 < coin <= total),
            default=unreachable,
        )
    return -1 if best[target] == unreachable else int(best[target])


def ordered_coin_combinations(coins: Iterable[int], target: int) -> int:
    """Count ordered coin sequences summing to ``target``, modulo ``MOD``."""
    _check_non_negative("target", target)
    denominations = list(coins)
    ways = [1] + [0] * target
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - coin] for coin in denominations if 0 < coin <= total) % MOD
    return ways[target]


def unordered_coin_combinations(coins: Iterable[int], target: int) -> int:
    """Count multisets of coins summing to ``target``, modulo ``MOD``."""
    _check_non_negative("target", target)
    ways = [1] + [0] * target
    for coin in coins:
        if coin <= 0:
            continue
        for total in range(coin, target + 1):
            ways[total] = (ways[total] + ways[total - coin]) % MOD
    return ways[target]


def removing_digits_steps(n: int) -> int:
    """Return the fewest steps to reach zero, each step subtracting one of the digits."""
    _check_non_negative("n", n)
    steps = [0] * (n + 1)
    for number in range(1, n + 1):
        digits = {int(ch) for ch in str(number)} - {0}
        steps[number] = min(steps[number - d] for d in digits) + 1
    return steps[n]