"""Compass calibration: applying signed corrections to an offset."""

from __future__ import annotations


def solve(text: str) -> tuple[int, int, int]:
    """Return the three calibrated values for the puzzle input."""
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("input needs an offset and a line of operations")

    offset = int(lines[0])
    operations = lines[-1]

    forward = offset + sum(
        int(operations[i - 1] + lines[i]) for i in range(1, len(lines) - 1)
    )

    reversed_ops = offset + sum(
        int(operations[i] + lines[len(operations) - i])
        for i in reversed(range(len(operations)))
    )

    two_digit = int(lines[0] + lines[1]) + sum(
        int(operations[len(operations) - i] + lines[i * 2] + lines[i * 2 + 1])
        for i in range(1, len(operations) // 2 + 1)
    )

    return forward, reversed_ops, two_digit