"""Crucial crafting: ranking items by quality and cost."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """A crafted item and its properties."""

    id: str
    quality: int
    cost: int
    unique_materials: int


def parse_item(line: str) -> Item:
    """Parse ``N ID | Quality : q, Cost : c, Unique Materials : m``."""
    head, sep, properties = line.partition(" | ")
    words = head.split(" ")
    fields = properties.split(", ")
    if not sep or len(words) < 2 or len(fields) < 3:
        raise ValueError(f"not an item: {line!r}")

    values = []
    for field in fields[:3]:
        _, colon, value = field.partition(" : ")
        if not colon:
            raise ValueError(f"not a property: {field!r}")
        values.append(int(value))
    quality, cost, materials = values
    return Item(words[1].strip(), quality, cost, materials)


def solve(text: str) -> int:
    """Sum the unique materials of the five best items by quality, then cost."""
    items = [parse_item(line) for line in text.splitlines()]
    ranked = sorted(items, key=lambda item: (item.quality, item.cost), reverse=True)
    return sum(item.unique_materials for item in ranked[:5])