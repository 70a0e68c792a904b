"""Aeolian transmissions: measuring and compressing messages."""

from __future__ import annotations

from itertools import groupby


def _char_size(c: str) -> int:
    if "A" <= c <= "Z":
        return ord(c) - ord("A") + 1
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    raise ValueError(f"character not supported: {c!r}")


def message_size(message: str) -> int:
    """Sum of letter positions (A=1) and digit values in ``message``."""
    return sum(_char_size(c) for c in message)


def compress(message: str) -> str:
    """Keep a tenth at each end and replace the middle by its length."""
    length = len(message)
    kept = length // 10
    return message[:kept] + str(length - kept * 2) + message[length - kept :]


def compress_losslessly(message: str) -> str:
    """Run-length encode ``message`` as count followed by character."""
    if not message:
        raise ValueError("cannot compress an empty message")
    return "".join(f"{len(list(run))}{c}" for c, run in groupby(message))


def solve(text: str) -> tuple[int, int, int]:
    """Return total sizes raw, after lossy and after lossless compression."""
    lines = text.splitlines()
    return (
        sum(message_size(line) for line in lines),
        sum(message_size(compress(line)) for line in lines),
        sum(message_size(compress_losslessly(line)) for line in lines),
    )