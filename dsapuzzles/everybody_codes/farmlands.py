"""The battle for the farmlands: counting potions for groups of enemies."""

from __future__ import annotations

from collections.abc import Sequence

_POTIONS = {"A": 0, "B": 1, "C": 3, "D": 5}
_EMPTY = "x"


def enemy_potion_cost(enemy: str) -> int:
    """Potions needed for a single enemy."""
    try:
        return _POTIONS[enemy]
    except KeyError:
        raise ValueError(f"invalid enemy: {enemy!r}") from None


def battle_cost(enemies: Sequence[str]) -> int:
    """Potions for a group; each enemy needs one extra per other enemy present."""
    fighters = [e for e in enemies if e != _EMPTY]
    if not fighters:
        return 0
    base = sum(enemy_potion_cost(e) for e in fighters)
    size = len(enemies)
    if len(fighters) < size:
        return base + (len(fighters) - 1) * (size - 1)
    return base + size * (size - 1)


def _groups(text: str, size: int) -> list[str]:
    enemies = text.rstrip("\r\n")
    return [enemies[i : i + size] for i in range(0, len(enemies), size)]


def part1(text: str) -> int:
    """Potions for enemies fighting alone."""
    return sum(enemy_potion_cost(e) for e in text.rstrip("\r\n"))


def part2(text: str) -> int:
    """Potions for enemies fighting in pairs."""
    return sum(battle_cost(group) for group in _groups(text, 2))


def part3(text: str) -> int:
    """Potions for enemies fighting in threes."""
    return sum(battle_cost(group) for group in _groups(text, 3))