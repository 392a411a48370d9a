"""Simple searches over lists and strings."""

from collections.abc import Iterable, Sequence


def find_two_that_sum(numbers: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)`` with ``i < j`` of two numbers adding to ``target``.

    Returns ``None`` when no such pair exists. The input is not modified.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(numbers):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None


def num_in_list(items: Iterable[int], num: int) -> bool:
    """Return whether ``num`` occurs in ``items``."""
    return num in items


def reverse(word: str) -> str:
    """Return ``word`` with its characters in reverse order."""
    return word[::-1]