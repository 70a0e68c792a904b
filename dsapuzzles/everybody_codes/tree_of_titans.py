"""The tree of titans: finding the branch with the unique fruit."""

from __future__ import annotations

from collections.abc import Mapping, Set

Tree = dict[str, set[str]]

_ROOT = "RR"
_FRUIT = "@"


def build_tree(text: str) -> Tree:
    """Parse ``NODE:child,child`` lines into a mapping."""
    tree: Tree = {}
    for line in text.splitlines():
        node, sep, children = line.partition(":")
        if not sep:
            raise ValueError(f"not a branch: {line!r}")
        tree[node] = set(children.split(","))
    return tree


def strongest_fruit_path(
    tree: Mapping[str, Set[str]], first_letter_only: bool = False
) -> str:
    """Path to the only fruit found at its depth, ending in '@'."""
    def label(node: str) -> str:
        return node[0] if first_letter_only else node

    layer = [("", _ROOT)]
    strongest = ""
    while layer:
        fruits = 0
        next_layer = []
        for path, node in reversed(layer):
            if node == _FRUIT:
                if fruits == 0:
                    strongest = path + node
                fruits += 1
                continue
            for child in sorted(tree.get(node, ())):
                next_layer.append((path + label(node), child))
        if fruits == 1:
            break
        layer = next_layer
    return strongest


def part1(text: str) -> str:
    """Full path with whole node names."""
    return strongest_fruit_path(build_tree(text), False)


def part2(text: str) -> str:
    """Path using the first letter of each node."""
    return strongest_fruit_path(build_tree(text), True)


def part3(text: str) -> str:
    """Same as part 2 for a larger tree."""
    return strongest_fruit_path(build_tree(text), True)