"""Conversion of numbers between positional bases 2 through 16."""

DIGITS = "0123456789ABCDEF"
MIN_BASE = 2
MAX_BASE = len(DIGITS)


def _check_base(base: int) -> None:
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"base must be between {MIN_BASE} and {MAX_BASE}, got {base}")


def base_to_dec(value: str, base: int) -> int:
    """Return the integer that ``value``, written in ``base``, represents.

    >>> base_to_dec("E", 16)
    14
    >>> base_to_dec("1110", 2)
    14
    """
    _check_base(base)
    result = 0
    for char in value:
        digit = DIGITS.find(char)
        if digit < 0:
            raise ValueError(f"invalid digit {char!r} in {value!r}")
        result = result * base + digit
    return result


def dec_to_base(dec: int, base: int) -> str:
    """Return ``dec`` written in ``base``; zero and negatives give an empty string.

    >>> dec_to_base(14, 16)
    'E'
    >>> dec_to_base(14, 2)
    '1110'
    """
    _check_base(base)
    digits = []
    while dec > 0:
        dec, remainder = divmod(dec, base)
        digits.append(DIGITS[remainder])
    return "".join(reversed(digits))


def base_to_base(value: str, base: int, new_base: int) -> str:
    """Convert ``value`` from ``base`` to ``new_base``.

    >>> base_to_base("E", 16, 2)
    '1110'
    """
    return dec_to_base(base_to_dec(value, base), new_base)