"""The FizzBuzz sequence, as items, as a line of text, or printed."""

import sys
from collections.abc import Iterator
from typing import TextIO


def fizz_buzz_items(n: int) -> Iterator[str]:
    """Yield the FizzBuzz words for the numbers 1 to ``n``."""
    for number in range(1, n + 1):
        if number % 15 == 0:
            yield "Fizz Buzz"
        elif number % 3 == 0:
            yield "Fizz"
        elif number % 5 == 0:
            yield "Buzz"
        else:
            yield str(number)


def fizz_buzz_line(n: int) -> str:
    """Return the FizzBuzz words for 1 to ``n`` joined by commas."""
    return ", ".join(fizz_buzz_items(n))


def fizz_buzz(n: int, file: TextIO | None = None) -> None:
    """Write the FizzBuzz line for 1 to ``n`` and a newline to ``file`` (stdout by default)."""
    print(fizz_buzz_line(n), file=file if file is not None else sys.stdout)