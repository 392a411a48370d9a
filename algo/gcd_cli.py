"""Read pairs of integers from standard input and print the GCD of each pair."""

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from algo.arith import gcd


def _parse_pairs(text: str) -> list[tuple[int, int]]:
    tokens = text.split()
    if not tokens:
        return []
    count = int(tokens[0])
    values = [int(token) for token in tokens[1 : 1 + 2 * max(count, 0)]]
    if len(values) < 2 * count:
        raise ValueError(f"expected {count} pairs of integers, got {len(values) / 2:g}")
    return list(zip(values[::2], values[1::2]))


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Read a count followed by that many integer pairs; write one GCD per line."""
    for a, b in _parse_pairs(stdin.read()):
        print(gcd(a, b), file=stdout)


def main(argv: Sequence[str] | None = None) -> None:
    """Command entry point: GCDs of the pairs given on standard input."""
    parser = argparse.ArgumentParser(
        description="Read N, then N lines of 'a b', and print gcd(a, b) for each line."
    )
    parser.parse_args(argv)
    try:
        run(sys.stdin, sys.stdout)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()