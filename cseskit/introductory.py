"""Introductory problems: sequences, counting and simple constructions."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, groupby

MOD = 10**9 + 7


def weird_algorithm(n: int) -> list[int]:
    """Return the Collatz sequence from ``n`` down to 1."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        sequence.append(n)
    return sequence


def longest_repetition(dna: str) -> int:
    """Return the length of the longest run of one repeated character."""
    if not dna:
        raise ValueError("sequence must not be empty")
    return max(sum(1 for _ in run) for _, run in groupby(dna))


def beautiful_permutation(n: int) -> list[int] | None:
    """Return a permutation of 1..n with no adjacent values differing by one, or None."""
    if n == 1:
        return [1]
    if n in (2, 3):
        return None
    return [*range(2, n + 1, 2), *range(1, n + 1, 2)]


def number_spiral(row: int, col: int) -> int:
    """Return the number at (row, col) of the infinite number spiral."""
    if row < 1 or col < 1:
        raise ValueError("row and col must be positive")
    layer = max(row, col)
    diagonal = layer * layer - layer + 1
    if row < layer:
        offset = layer - row
        return diagonal + offset if col % 2 else diagonal - offset
    offset = layer - col
    return diagonal - offset if row % 2 else diagonal + offset


def two_knights(n: int) -> list[int]:
    """For k = 1..n, count placements of two non-attacking knights on a k x k board."""
    return [
        (k * k) * (k * k - 1) // 2 - 4 * (k - 1) * (k - 2)
        for k in range(1, n + 1)
    ]


def sliding_window_median(values: Iterable[int], k: int) -> list[int]:
    """Return the lower median of every window of ``k`` consecutive values."""
    if k < 1:
        raise ValueError(f"window size must be positive, got {k}")
    items = list(values)
    window: list[int] = []
    medians = []
    for position, value in enumerate(items):
        insort(window, value)
        if position >= k:
            del window[bisect_left(window, items[position - k])]
        if position >= k - 1:
            medians.append(window[(k - 1) // 2])
    return medians


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """Return the number of 1..n absent from ``numbers``."""
    return n * (n + 1) // 2 - sum(numbers)


def two_sets(n: int) -> tuple[list[int], list[int]] | None:
    """Split 1..n into two sets of equal sum, or return None if impossible."""
    total = n * (n + 1) // 2
    if total % 2:
        return None
    remaining = total // 2
    first: list[int] = []
    second: list[int] = []
    for number in range(n, 0, -1):
        if remaining >= number:
            first.append(number)
            remaining -= number
        else:
            second.append(number)
    return first, second


def increasing_array_moves(values: Iterable[int]) -> int:
    """Return the fewest unit increments making ``values`` non-decreasing."""
    items = list(values)
    return sum(peak - value for peak, value in zip(accumulate(items, max), items))


def bit_strings(n: int) -> int:
    """Count bit strings of length ``n``, modulo ``MOD``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return pow(2, n, MOD)


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of n factorial."""
    count = 0
    power = 5
    while power <= n:
        count += n // power
        power *= 5
    return count


def sum_of_three_values(values: Sequence[int], target: int) -> tuple[int, int, int] | None:
    """Return 1-based positions of three values summing to ``target``, or None."""
    ordered = sorted((value, position) for position, value in enumerate(values, start=1))
    for first, (value, position) in enumerate(ordered):
        needed = target - value
        low, high = first + 1, len(ordered) - 1
        while low < high:
            pair = ordered[low][0] + ordered[high][0]
            if pair == needed:
                return position, ordered[low][1], ordered[high][1]
            if pair < needed:
                low += 1
            else:
                high -= 1
    return None


def coin_piles(a: int, b: int) -> bool:
    """Tell whether both piles can be emptied by removing 1 and 2 coins at a time."""
    return (a + b) % 3 == 0 and a <= 2 * b and b <= 2 * a


def palindrome_reorder(text: str) -> str | None:
    """Rearrange ``text`` into a palindrome, or return None if impossible."""
    counts = Counter(text)
    odd = [ch for ch, count in counts.items() if count % 2]
    if len(odd) > 1:
        return None
    half = "".join(ch * (counts[ch] // 2) for ch in sorted(counts))
    middle = odd[0] if odd else ""
    return half + middle + half[::-1]