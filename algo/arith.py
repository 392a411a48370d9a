"""Small arithmetic routines: factoring, Fibonacci numbers, GCD and sums."""

from collections.abc import Iterable


def factor(primes: Iterable[int], number: int) -> list[int]:
    """Factor ``number`` by ``primes``; any remainder above 1 is appended as is.

    >>> factor([2, 3, 5], 28)
    [2, 2, 7]
    >>> factor([], 4)
    [4]
    """
    if number == 0:
        raise ValueError("cannot factor zero")
    result = []
    for prime in primes:
        while number % prime == 0:
            result.append(prime)
            number //= prime
    if number > 1:
        result.append(number)
    return result


def fibonacci(n: int) -> int:
    """Return the nth Fibonacci number; values of ``n`` below 2 are returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


def total(numbers: Iterable[int]) -> int:
    """Return the sum of ``numbers``."""
    return sum(numbers)