# cseskit

Small, dependency-free Python functions for classic competitive-programming
problems: dynamic programming over coins and dice, introductory puzzles,
modular combinatorics and number theory. Results that can grow large are
reduced modulo 1 000 000 007, as the problems require.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `cseskit.dynamic`: `dice_combinations`, `minimum_coins`,
  `ordered_coin_combinations`, `unordered_coin_combinations` and
  `removing_digits_steps`.
- `cseskit.introductory`: `weird_algorithm`, `longest_repetition`,
  `beautiful_permutation`, `number_spiral`, `two_knights`,
  `sliding_window_median`, `missing_number`, `two_sets`,
  `increasing_array_moves`, `bit_strings`, `trailing_zeros`,
  `sum_of_three_values`, `coin_piles` and `palindrome_reorder`.
- `cseskit.combinatorics`: `FactorialTable`, `binomial_coefficient`,
  `exponentiation`, `tower_exponentiation`, `distinct_arrangements`,
  `distribute_apples`, `derangements`, `bracket_sequences` and
  `bracket_completions`.
- `cseskit.number_theory`: `first_player_wins_nim`, `sum_of_divisors`,
  `divisor_counts`, `prime_multiples` and `coprime_pairs`.
- `cseskit.cli`: the `cseskit` command described below.

Functions that have no answer for some inputs return `None` there
(`beautiful_permutation`, `two_sets`, `sum_of_three_values`,
`palindrome_reorder`); `minimum_coins` returns `-1` when the target cannot
be formed. Inputs outside a function's domain, such as negative sizes,
raise `ValueError`.

## Examples

```python
from cseskit.dynamic import dice_combinations, minimum_coins, removing_digits_steps
from cseskit.combinatorics import binomial_coefficient, derangements, bracket_sequences
from cseskit.number_theory import sum_of_divisors, prime_multiples
from cseskit.introductory import number_spiral, two_sets

dice_combinations(3)              # 4
minimum_coins([1, 5, 7], 11)      # 3
removing_digits_steps(27)         # 5

binomial_coefficient(5, 3)        # 10
derangements(4)                   # 9
bracket_sequences(6)              # 5

sum_of_divisors(5)                # 21
prime_multiples(20, [2, 5])       # 12

number_spiral(2, 3)               # 8
two_sets(3)                       # ([3], [2, 1])
```

When many binomial coefficients are needed, build a `FactorialTable` once
and call its `binomial` method:

```python
from cseskit.combinatorics import FactorialTable

table = FactorialTable(1000)
table.binomial(10, 4)             # 210
```

## Command line

The package installs a `cseskit` command. It takes the name of a problem,
reads that problem's input from standard input as whitespace-separated
integers, and prints one answer per line:

- `number-spiral`: a count of tests, then a row and column for each; prints
  the spiral value at each position.
- `nim`: a pile count, then the piles; prints `First` or `Second`.
- `nim-game`: a count of games, then for each a pile count and the piles;
  prints `first` or `second` for each game.
- `counting-divisors`: a count of values, then the values; prints the number
  of divisors of each.

```
$ printf '3\n2 3\n1 1\n4 2\n' | cseskit number-spiral
8
1
15
$ printf '3\n16\n17\n18\n' | cseskit counting-divisors
5
2
6
$ cseskit --help
```

Malformed or short input makes the command print a message to standard
error and exit with status 1.

## Limits

Only the four problems above are available from the command line; every
other problem is reached by calling its function from Python.