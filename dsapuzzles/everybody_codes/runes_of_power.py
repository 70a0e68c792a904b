"""The runes of power: finding runic words in an inscription."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

Words = dict[str, list[str]]
Position = tuple[int, int]


def parse_runes(text: str) -> tuple[Words, list[str]]:
    """Parse ``WORDS:a,b,...``, a blank line, then the inscription lines."""
    lines = text.split("\n")
    head, sep, listed = lines[0].partition(":")
    if not sep:
        raise ValueError(f"not a word list: {lines[0]!r}")
    words: Words = {}
    for word in listed.split(","):
        if not word:
            raise ValueError("empty rune word")
        words.setdefault(word[0], []).append(word)
    return words, lines[2:]


def count_words(words: Words, inscription: str) -> int:
    """Count every occurrence of a runic word in the inscription."""
    count = 0
    for part in inscription.split(" "):
        for i, c in enumerate(part):
            tail = part[i:]
            count += sum(1 for w in words.get(c, ()) if tail.startswith(w))
    return count


def _horizontal(
    word: str, matrix: Sequence[str], pos: Position, wrap: bool, step: int
) -> Optional[set[Position]]:
    x, y0 = pos
    row = matrix[x]
    width = len(row)
    found = {pos}
    for i in range(1, len(word)):
        y = y0 + step * i
        if wrap:
            y %= width
        if not 0 <= y < width or row[y] != word[i]:
            return None
        found.add((x, y))
    return found


def _vertical(
    word: str, matrix: Sequence[str], pos: Position, step: int
) -> Optional[set[Position]]:
    x0, y = pos
    found = {pos}
    for i in range(1, len(word)):
        x = x0 + step * i
        if not 0 <= x < len(matrix) or y >= len(matrix[x]) or matrix[x][y] != word[i]:
            return None
        found.add((x, y))
    return found


def count_symbols(
    words: Words, matrix: Sequence[str], wrap: bool = False, vertical: bool = False
) -> int:
    """Count cells belonging to a runic word read left, right and optionally up/down."""
    symbols: set[Position] = set()
    for i, row in enumerate(matrix):
        for j, c in enumerate(row):
            for word in words.get(c, ()):
                hits = [
                    _horizontal(word, matrix, (i, j), wrap, 1),
                    _horizontal(word, matrix, (i, j), wrap, -1),
                ]
                if vertical:
                    hits.append(_vertical(word, matrix, (i, j), 1))
                    hits.append(_vertical(word, matrix, (i, j), -1))
                for found in hits:
                    if found:
                        symbols |= found
    return len(symbols)


def part1(text: str) -> int:
    """Runic words in the first inscription line."""
    words, lines = parse_runes(text)
    if not lines:
        raise ValueError("no inscription given")
    return count_words(words, lines[0])


def part2(text: str) -> int:
    """Symbols covered by words read forwards or backwards."""
    words, lines = parse_runes(text)
    return count_symbols(words, lines, False, False)


def part3(text: str) -> int:
    """Symbols covered on a scale wrapping horizontally, read in four directions."""
    words, lines = parse_runes(text)
    return count_symbols(words, lines, True, True)