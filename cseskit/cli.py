"""Command line entry point that answers problems read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from cseskit.introductory import number_spiral
from cseskit.number_theory import divisor_counts, first_player_wins_nim

Handler = Callable[[Iterator[str]], list[str]]


def _next_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"not an integer: {token!r}") from None


def _take(tokens: Iterator[str], count: int) -> list[int]:
    return [_next_int(tokens) for _ in range(count)]


def _number_spiral(tokens: Iterator[str]) -> list[str]:
    tests = _next_int(tokens)
    lines = []
    for _ in range(tests):
        row, col = _take(tokens, 2)
        lines.append(str(number_spiral(row, col)))
    return lines


def _nim_single(tokens: Iterator[str]) -> list[str]:
    piles = _take(tokens, _next_int(tokens))
    return ["First" if first_player_wins_nim(piles) else "Second"]


def _nim_games(tokens: Iterator[str]) -> list[str]:
    tests = _next_int(tokens)
    lines = []
    for _ in range(tests):
        piles = _take(tokens, _next_int(tokens))
        lines.append("first" if first_player_wins_nim(piles) else "second")
    return lines


def _counting_divisors(tokens: Iterator[str]) -> list[str]:
    queries = _take(tokens, _next_int(tokens))
    if any(value < 0 for value in queries):
        raise ValueError("values must be non-negative")
    counts = divisor_counts(max(queries, default=0))
    return [str(counts[value]) for value in queries]


_PROBLEMS: dict[str, tuple[Handler, str]] = {
    "number-spiral": (_number_spiral, "value at each (row, col) of the number spiral"),
    "nim": (_nim_single, "winner of a single nim position"),
    "nim-game": (_nim_games, "winner of each of several nim games"),
    "counting-divisors": (_counting_divisors, "number of divisors of each value"),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answers."""
    parser = argparse.ArgumentParser(
        prog="cseskit",
        description="Answer a problem whose input is read from standard input.",
    )
    subparsers = parser.add_subparsers(dest="problem", required=True)
    for name, (_, help_text) in _PROBLEMS.items():
        subparsers.add_parser(name, help=help_text)
    args = parser.parse_args(argv)

    handler, _ = _PROBLEMS[args.problem]
    tokens = iter(sys.stdin.read().split())
    try:
        lines = handler(tokens)
    except ValueError as exc:
        print(f"cseskit: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("".join(f"{line}\n" for line in lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())