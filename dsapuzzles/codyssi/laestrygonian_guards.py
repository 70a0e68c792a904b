"""Laestrygonian guards: cheapest paths and cycles in a weighted graph."""

from __future__ import annotations

import heapq
from math import prod
from typing import Optional

Graph = dict[str, dict[str, int]]


def parse_graph(text: str) -> Graph:
    """Parse lines of ``START -> END | COST`` into an adjacency mapping."""
    nodes: Graph = {}
    for line in text.splitlines():
        path, sep, value = line.partition(" | ")
        start, arrow, end = path.partition(" -> ")
        if not sep or not arrow:
            raise ValueError(f"not an edge: {line!r}")
        nodes.setdefault(start, {})[end] = int(value)
    return nodes


def lowest_path_cost(
    start: str, end: str, nodes: Graph, fixed_cost: Optional[int] = None
) -> Optional[int]:
    """Cheapest cost from ``start`` to ``end``, or None if unreachable.

    With ``fixed_cost`` every edge costs that amount instead of its weight.
    """
    visited: set[str] = set()
    heap: list[tuple[int, str]] = [(0, start)]
    while heap:
        cost, node = heapq.heappop(heap)
        if node == end:
            return cost
        if node in visited:
            continue
        visited.add(node)
        for child, weight in nodes.get(node, {}).items():
            step = weight if fixed_cost is None else fixed_cost
            heapq.heappush(heap, (cost + step, child))
    return None


def _costs_from(start: str, nodes: Graph, fixed_cost: Optional[int]) -> dict[str, int]:
    costs = {}
    for key in nodes:
        cost = lowest_path_cost(start, key, nodes, fixed_cost)
        if cost is not None:
            costs[key] = cost
    return costs


def _top_three_product(costs: dict[str, int]) -> int:
    return prod(sorted(costs.values(), reverse=True)[:3])


def _priciest_cycle(nodes: Graph) -> int:
    best = 0
    for key in nodes:
        predecessors = {name for name, children in nodes.items() if key in children}
        if not predecessors:
            continue
        reachable = _costs_from(key, nodes, None)
        cycles = [
            cost + nodes[name][key]
            for name, cost in reachable.items()
            if name in predecessors
        ]
        if cycles:
            best = max(best, max(cycles))
    return best


def solve(text: str) -> tuple[int, int, int]:
    """Return the hop and cost products of the three farthest nodes and the priciest cycle."""
    nodes = parse_graph(text)
    return (
        _top_three_product(_costs_from("STT", nodes, 1)),
        _top_three_product(_costs_from("STT", nodes, None)),
        _priciest_cycle(nodes),
    )