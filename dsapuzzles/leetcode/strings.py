"""String puzzles: numerals, prefixes, palindromes, brackets and anagrams."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import takewhile

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_BRACKETS = {"(": ")", "{": "}", "[": "]"}
_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer."""
    try:
        values = [_ROMAN[c] for c in s]
    except KeyError as exc:
        raise ValueError(f"invalid numeral: {exc.args[0]!r}") from None
    return sum(
        -current if current < following else current
        for current, following in zip(values, values[1:] + [0])
    )


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string."""
    if not strs:
        raise ValueError("no strings given")
    prefix = strs[0]
    for s in strs[1:]:
        if not prefix:
            return ""
        shared = sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(prefix, s)))
        prefix = prefix[:shared]
    return prefix


def is_palindrome(s: str) -> bool:
    """Check for a palindrome, ignoring non-alphanumerics and ASCII case."""
    chars = [c.lower() if c.isascii() else c for c in s if c.isalnum()]
    return chars == chars[::-1]


def is_valid(s: str) -> bool:
    """Return True if every bracket is closed by its partner in order."""
    stack: list[str] = []
    for c in s:
        if stack and _BRACKETS.get(stack[-1]) == c:
            stack.pop()
        else:
            stack.append(c)
    return not stack


def _check_lowercase(s: str) -> None:
    for c in s:
        if c not in _ALPHABET:
            raise ValueError(f"only lowercase ASCII letters are supported, got {c!r}")


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` rearranges the lowercase letters of ``s``."""
    if len(s) != len(t):
        return False
    _check_lowercase(s)
    _check_lowercase(t)
    return Counter(s) == Counter(t)


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    if len(haystack) < len(needle):
        return -1
    if not needle:
        raise ValueError("needle must not be empty")
    return haystack.find(needle)


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, c in enumerate(s):
        if last_seen.get(c, -1) >= start:
            start = last_seen[c] + 1
        last_seen[c] = index
        best = max(best, index - start + 1)
    return best


def group_anagrams(strs: Sequence[str]) -> list[list[str]]:
    """Group lowercase words that are anagrams of one another."""
    groups: dict[tuple[int, ...], list[str]] = {}
    for s in strs:
        _check_lowercase(s)
        counts = Counter(s)
        key = tuple(counts[letter] for letter in _ALPHABET)
        groups.setdefault(key, []).append(s)
    return list(groups.values())