"""Functions with different growth rates, used to illustrate Big O."""

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO


def add(a: int, b: int) -> int:
    """Return ``a + b``; O(1)."""
    return a + b


def sum_to_max(maximum: int) -> int:
    """Return 1 + 2 + ... + ``maximum`` by counting; O(N)."""
    result = 0
    for value in range(1, maximum + 1):
        result += value
    return result


def sum_to_max_v2(maximum: int) -> int:
    """Return 1 + 2 + ... + ``maximum`` by formula; O(1)."""
    return maximum * (maximum + 1) // 2


def sum_vals(vals: Iterable[int]) -> int:
    """Return the sum of ``vals``; O(N)."""
    result = 0
    for value in vals:
        result += value
    return result


def find(items: Sequence[int], x: int) -> int:
    """Return the index of the first ``x`` in ``items``, or -1; O(N)."""
    for index, value in enumerate(items):
        if value == x:
            return index
    return -1


def grid(x: int, y: int) -> str:
    """Return ``y`` rows of ``x`` alternating 'x'/'o' characters; O(XY).

    The alternation carries on from one row to the next.
    """
    rows = []
    position = 0
    for _ in range(y):
        rows.append("".join("xo"[(position + column) % 2] for column in range(x)) + "\n")
        position += x
    return "".join(rows)


def print_list(word: str, n: int, file: TextIO | None = None) -> None:
    """Print the code points of ``word`` run together, ``n`` times; O(N*M)."""
    out = file if file is not None else sys.stdout
    line = "".join(str(ord(char)) for char in word)
    for _ in range(n):
        print(line, file=out)


def cube(n: int) -> str:
    """Return every ``(x, y, z)`` triple with coordinates below ``n``, one per line; O(N^3)."""
    return "".join(
        f"({x}, {y}, {z})\n" for x in range(n) for y in range(n) for z in range(n)
    )