import math
from itertools import permutations, product

import pytest

from cseskit.combinatorics import (
    MOD,
    FactorialTable,
    binomial_coefficient,
    bracket_completions,
    bracket_sequences,
    derangements,
    distinct_arrangements,
    distribute_apples,
    exponentiation,
    tower_exponentiation,
)


def _is_balanced(sequence):
    depth = 0
    for ch in sequence:
        depth += 1 if ch == "(" else -1
        if depth < 0:
            return False
    return depth == 0


def test_factorial_table_matches_math_comb():
    table = FactorialTable(40)
    for a in range(41):
        for b in range(a + 1):
            assert table.binomial(a, b) == math.comb(a, b) % MOD


def test_factorial_table_large_values_are_reduced():
    table = FactorialTable(200)
    assert table.binomial(200, 100) == math.comb(200, 100) % MOD


def test_factorial_table_out_of_range_lower_index_is_zero():
    table = FactorialTable(10)
    assert table.binomial(5, 6) == 0
    assert table.binomial(5, -1) == 0


def test_factorial_table_rejects_bad_limits():
    with pytest.raises(ValueError):
        FactorialTable(-1)
    with pytest.raises(ValueError):
        FactorialTable(5).binomial(6, 2)


def test_binomial_coefficient_agrees_with_table():
    table = FactorialTable(60)
    for a, b in [(60, 30), (10, 3), (0, 0), (7, 7)]:
        assert binomial_coefficient(a, b) == table.binomial(a, b)


def test_exponentiation_zero_power_is_one():
    assert exponentiation(123, 0) == 1
    assert exponentiation(0, 0) == exponentiation(5, 0)


@pytest.mark.parametrize("base", [2, 3, 10, 123456789])
def test_exponentiation_adds_exponents(base):
    for b, c in [(0, 5), (7, 11), (1000, 999999)]:
        combined = exponentiation(base, b) * exponentiation(base, c) % MOD
        assert exponentiation(base, b + c) == combined


@pytest.mark.parametrize("base", [2, 7, 999999])
def test_exponentiation_fermat(base):
    assert exponentiation(base, MOD - 1) == exponentiation(base, 0)


def test_exponentiation_rejects_negative_exponent():
    with pytest.raises(ValueError):
        exponentiation(2, -1)


@pytest.mark.parametrize("a,b,c", [(3, 7, 1), (2, 3, 2), (5, 2, 10), (7, 0, 0), (9, 4, 0)])
def test_tower_exponentiation_matches_direct_power(a, b, c):
    assert tower_exponentiation(a, b, c) == exponentiation(a, b**c)


def test_tower_exponentiation_rejects_negative():
    with pytest.raises(ValueError):
        tower_exponentiation(2, -1, 3)


@pytest.mark.parametrize("text", ["", "a", "aabac", "abcd", "zzzz", "aabbc"])
def test_distinct_arrangements_matches_enumeration(text):
    assert distinct_arrangements(text) == len(set(permutations(text)))


@pytest.mark.parametrize("children,apples", [(1, 4), (2, 3), (3, 2), (3, 5), (4, 0)])
def test_distribute_apples_matches_enumeration(children, apples):
    expected = sum(
        1 for shares in product(range(apples + 1), repeat=children) if sum(shares) == apples
    )
    assert distribute_apples(children, apples) == expected


def test_distribute_apples_rejects_negative():
    with pytest.raises(ValueError):
        distribute_apples(-1, 3)


@pytest.mark.parametrize("n", range(0, 8))
def test_derangements_matches_enumeration(n):
    expected = sum(
        1 for perm in permutations(range(n)) if all(v != i for i, v in enumerate(perm))
    )
    assert derangements(n) == expected


def test_derangements_rejects_negative():
    with pytest.raises(ValueError):
        derangements(-2)


@pytest.mark.parametrize("n", range(0, 13))
def test_bracket_sequences_matches_enumeration(n):
    expected = sum(1 for seq in product("()", repeat=n) if _is_balanced(seq))
    assert bracket_sequences(n) == expected


@pytest.mark.parametrize("n", [0, 4, 8, 10])
def test_bracket_completions_with_empty_prefix(n):
    assert bracket_completions(n, "") == bracket_sequences(n)


@pytest.mark.parametrize(
    "n,prefix", [(6, "(("), (8, "(()"), (6, "())"), (4, "(((("), (7, "("), (6, "()()()"), (10, "(")]
)
def test_bracket_completions_matches_enumeration(n, prefix):
    expected = sum(
        1
        for seq in product("()", repeat=n)
        if "".join(seq).startswith(prefix) and _is_balanced(seq)
    )
    assert bracket_completions(n, prefix) == expected


def test_bracket_completions_rejects_other_characters():
    with pytest.raises(ValueError):
        bracket_completions(4, "(x")