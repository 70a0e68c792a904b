"""Games in a storm: numbers written in custom bases up to 68."""

from __future__ import annotations

from math import isqrt

_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz!@#$%^"


def smallest_four_digit_base(number: int) -> int:
    """Return the smallest base in which ``number`` needs at most four digits."""
    if number < 0:
        raise ValueError("number must not be negative")
    base = max(1, isqrt(isqrt(number)))
    while number // base**4:
        base += 1
    return base


def to_custom_base(number: int, base: int) -> str:
    """Write ``number`` in ``base``; zero gives an empty string."""
    if not 2 <= base <= len(_ALPHABET):
        raise ValueError(f"base must be between 2 and {len(_ALPHABET)}")
    digits: list[str] = []
    n = number
    while n > 0:
        n, remainder = divmod(n, base)
        digits.append(_ALPHABET[remainder])
    return "".join(reversed(digits))


def from_custom_base(number: str, base: int) -> int:
    """Read ``number`` written in ``base`` with the custom digit alphabet."""
    if not number:
        raise ValueError("empty number")
    if base < 1:
        raise ValueError("base must be positive")
    result = 0
    for digit in number:
        value = _ALPHABET.find(digit)
        if value < 0:
            raise ValueError(f"invalid digit: {digit!r}")
        result = result * base + value
    return result


def solve(text: str) -> tuple[int, str, int]:
    """Return the largest reading, the sum in base 68 and its smallest 4-digit base."""
    values = []
    for line in text.splitlines():
        number, sep, base = line.partition(" ")
        if not sep:
            raise ValueError(f"not a reading: {line!r}")
        values.append(from_custom_base(number, int(base)))
    if not values:
        raise ValueError("no readings given")
    total = sum(values)
    return max(values), to_custom_base(total, 68), smallest_four_digit_base(total)