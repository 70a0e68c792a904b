"""Puzzles from the "Summer at the Lab" set."""

from __future__ import annotations

from collections import defaultdict, deque

_BASE65 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz!@#"


def _split_once(line: str, separator: str) -> tuple[str, str]:
    left, sep, right = line.partition(separator)
    if not sep:
        raise ValueError(f"missing {separator!r} in line: {line!r}")
    return left, right


def handling_the_budget(text: str) -> tuple[int, int, int]:
    """Return the total, the total without the 20 priciest, and the alternating sum."""
    prices = [int(line) for line in text.splitlines()]
    if any(price < 0 for price in prices):
        raise ValueError("prices must not be negative")
    discount = sum(price if i % 2 == 0 else -price for i, price in enumerate(prices))
    ordered = sorted(prices, reverse=True)
    return sum(ordered), sum(ordered[20:]), discount


def _gate_layer(inputs: list[bool]) -> list[bool]:
    if len(inputs) % 2:
        raise ValueError("a gate layer needs an even number of inputs")
    return [
        (a and b) if i % 2 == 0 else (a or b)
        for i, (a, b) in enumerate(zip(inputs[::2], inputs[1::2]))
    ]


def sensors_and_circuits(text: str) -> tuple[int, int, int]:
    """Evaluate sensor readings through alternating AND/OR gate layers."""
    sensors = [line == "TRUE" for line in text.splitlines()]
    if not sensors:
        raise ValueError("no sensors given")

    active = sum(sensors)
    id_sum = sum(range(1, active + 1))
    first_layer_true = sum(_gate_layer(sensors))

    true_outputs = 0
    layer = sensors
    while len(layer) != 1:
        layer = _gate_layer(layer)
        true_outputs += sum(layer)

    return id_sum, first_layer_true, true_outputs + active


def to_base65(number: int) -> str:
    """Write a positive number in base 65; zero and negatives give an empty string."""
    digits: list[str] = []
    n = number
    while n > 0:
        n, remainder = divmod(n, 65)
        digits.append(_BASE65[remainder])
    return "".join(reversed(digits))


def unformatted_readings(text: str) -> tuple[int, int, str]:
    """Return the sum of bases, the sum of readings, and that sum in base 65."""
    pairs = [_split_once(line, " ") for line in text.splitlines()]
    base_sum = sum(int(base) for _, base in pairs)
    total = sum(int(reading, int(base)) for reading, base in pairs)
    return base_sum, total, to_base65(total)


def traversing_the_country(text: str) -> tuple[int, int, int]:
    """Return location count, locations within 3 hops of STT, and total hop distance."""
    links: defaultdict[str, set[str]] = defaultdict(set)
    for line in text.splitlines():
        a, b = _split_once(line, " <-> ")
        links[a].add(b)
        links[b].add(a)
    graph = dict(links)

    visited: set[str] = set()
    queue: deque[tuple[int, str]] = deque([(0, "STT")])
    while queue:
        cost, location = queue.popleft()
        if cost > 3:
            break
        visited.add(location)
        queue.extend((cost + 1, n) for n in graph[location] if n not in visited)

    seen = {"STT"}
    queue = deque([(0, "STT")])
    time = 0
    while queue:
        cost, location = queue.popleft()
        time += cost
        for neighbour in graph[location]:
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append((cost + 1, neighbour))

    return len(graph), len(visited), time