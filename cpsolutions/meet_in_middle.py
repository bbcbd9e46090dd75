"""Counting subsets with a given sum by splitting the input in two halves."""

import argparse
import sys
from collections import Counter


def _bounded_subset_sums(values, target):
    """Sums of subsets of ``values`` whose running total never exceeds ``target``.

    Elements are added in index order; a subset is dropped as soon as a
    partial sum goes above ``target``.
    """
    states = [0]
    for value in values:
        states.extend([s + value for s in states if s + value <= target])
    sums = states[1:]
    if target >= 0:
        sums.append(0)
    return sums


def count_subsets_with_sum(values, target):
    """Number of subsets of ``values`` adding up to exactly ``target``."""
    values = list(values)
    mid = len(values) // 2
    left = Counter(_bounded_subset_sums(values[:mid], target))
    return sum(left[target - s] for s in _bounded_subset_sums(values[mid:], target))


def main(argv=None):
    """Read ``n s`` and ``n`` values, print the number of subsets summing to ``s``."""
    parser = argparse.ArgumentParser(description="Count subsets with a given sum.")
    parser.add_argument("input", nargs="?", help="input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("expected n and s")
    n, target = int(tokens[0]), int(tokens[1])
    if n < 0 or len(tokens) < 2 + n:
        raise ValueError(f"expected {n} values")
    values = [int(token) for token in tokens[2:2 + n]]
    print(count_subsets_with_sum(values, target))
    return 0