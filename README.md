# cpsolutions

A collection of contest problem solutions written as plain Python functions,
plus a small command for counting subsets with a given sum and a helper for
rendering nested containers in debug output.

## Installation

    pip install .

## Command line

Count the subsets of a list whose sum equals a target, using a meet-in-the-middle
split. The input is `n s` followed by `n` numbers, read from a file given as the
only argument or from standard input:

    echo "3 5 2 3 5" | cpsolutions-mitm

This prints `2` (the subsets `{2, 3}` and `{5}`).

## Library use

The functions are grouped by kind of problem:

- `cpsolutions.strings` — text problems such as `decode_borze`, `is_pangram`,
  `strong_password`, `insert_a` and `sort_query_operations`.
- `cpsolutions.arithmetic` — number problems such as `theatre_square`,
  `damaged_dragons`, `count_triplets`, `min_bills` and `lcm`.
- `cpsolutions.sequences` — list problems such as `tram_capacity`,
  `sereja_and_dima`, `spy_index` and `inverse_permutation`.
- `cpsolutions.grids` — grid problems and a `UnionFind` structure (with
  `find` and `union`): `reduce_grid`, `count_regions`, `count_critical_cells`,
  `beautiful_matrix_moves` and `snake_pattern`.
- `cpsolutions.meet_in_middle` — `count_subsets_with_sum`, and `main` behind
  the `cpsolutions-mitm` command.
- `cpsolutions.debugfmt` — `format_value` renders tuples as `(a, b)`, lists
  and deques as `[a, b]`, mappings as `{k: v}` and sets as `{a, b}`, with
  booleans as `1`/`0`; `debug` writes a `BreakPoint(i) -> label = value` line
  to standard error (or a given stream) and returns it.

Example:

    >>> from cpsolutions.arithmetic import theatre_square
    >>> theatre_square(6, 6, 4)
    4
    >>> from cpsolutions.meet_in_middle import count_subsets_with_sum
    >>> count_subsets_with_sum([2, 3, 5], 5)
    2
    >>> from cpsolutions.grids import count_regions
    >>> count_regions(["..#", "#.."])
    1

Invalid input, such as a malformed Borze code or an out-of-range query,
raises `ValueError`.

## What it does not do

There is no general command that reads a judge-style input for an arbitrary
problem and prints its answer: apart from `cpsolutions-mitm`, the solutions
are called as Python functions. The package also has no longest increasing
subsequence, room counting or sudoku search functions.

## Tests

    pip install .[test]
    pytest