"""Not fast but furious: racing chariot plans around a track."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Optional

Devices = dict[str, list[str]]

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_START_POWER = 10
_RACE_LAPS = 2024
_PLAN_ACTIONS = {"+": 5, "-": 3, "=": 3}


def parse_devices(text: str) -> Devices:
    """Parse ``ID:a,b,c`` lines into each device's action plan."""
    devices: Devices = {}
    for line in text.splitlines():
        name, sep, actions = line.partition(":")
        if not sep:
            raise ValueError(f"not a device: {line!r}")
        devices[name] = [a[0] for a in actions.split(",") if a]
    return devices


def parse_track(text: str) -> list[str]:
    """Walk the drawn loop from the top-left corner back to 'S'."""
    rows = text.splitlines()
    track: list[str] = []
    last = current = (0, 0)
    while True:
        step = None
        for dx, dy in _DIRECTIONS:
            x, y = current[0] + dx, current[1] + dy
            if (
                0 <= x < len(rows)
                and 0 <= y < len(rows[x])
                and rows[x][y] != " "
                and (x, y) != last
            ):
                step = (x, y)
                break
        if step is None:
            return track
        track.append(rows[step[0]][step[1]])
        last, current = current, step
        if rows[step[0]][step[1]] == "S":
            return track


def run_laps(
    track: Sequence[str],
    plan: Sequence[str],
    laps: int,
    stop_at: Optional[int] = None,
) -> int:
    """Total essence gathered over ``laps`` laps, stopping early past ``stop_at``."""
    if not plan:
        raise ValueError("empty plan")
    power = _START_POWER
    total = 0
    pos = 0
    for _ in range(laps):
        for segment in track:
            action = plan[pos % len(plan)] if segment in "=S" else segment
            if action == "+":
                power += 1
            elif action == "-" and power > 0:
                power -= 1
            total += power
            pos += 1
        if stop_at is not None and total >= stop_at:
            break
    return total


def rank_device_plans(
    devices: Mapping[str, Sequence[str]], track: Sequence[str], laps: int
) -> str:
    """Device ids concatenated from most to least essence."""
    ranked = sorted(devices, key=lambda d: run_laps(track, devices[d], laps), reverse=True)
    return "".join(ranked)


def _arrangements(counts: dict[str, int], prefix: list[str]) -> Iterator[list[str]]:
    if not counts:
        yield prefix
        return
    for action in sorted(counts):
        rest = dict(counts)
        rest[action] -= 1
        if not rest[action]:
            del rest[action]
        yield from _arrangements(rest, prefix + [action])


def all_plans(counts: Mapping[str, int]) -> list[list[str]]:
    """Every distinct ordering using each action exactly ``counts`` times."""
    return list(_arrangements({a: n for a, n in counts.items() if n > 0}, []))


def winning_plans_count(devices_text: str, track_text: str) -> int:
    """Plans of 5 '+', 3 '-' and 3 '=' that beat the first device over 2024 laps."""
    devices = parse_devices(devices_text)
    if not devices:
        raise ValueError("no devices given")
    track = parse_track(track_text)
    rival = run_laps(track, next(iter(devices.values())), _RACE_LAPS)
    return sum(
        1
        for plan in all_plans(_PLAN_ACTIONS)
        if run_laps(track, plan, _RACE_LAPS, rival) > rival
    )