"""Command line runner printing the answers of every puzzle set."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Optional, TextIO

from dsapuzzles.codyssi import (
    absurd_arithmetic,
    aeolian_transmissions,
    compass_calibration,
    crucial_crafting,
    cyclops_chaos,
    games_in_a_storm,
    laestrygonian_guards,
    lotus_scramble,
    patron_islands,
    risky_shortcut,
    siren_disruption,
    summer_at_the_lab,
    supplies_in_surplus,
    windy_bargain,
)
from dsapuzzles.everybody_codes import (
    clap_dance,
    farmlands,
    mining_maestro,
    racing,
    runes_of_power,
    smiths_puzzle,
    tree_of_titans,
)


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _report(out: TextIO, title: str, answers: Sequence[object], last: bool = False) -> None:
    out.write(f"  {'└' if last else '├'}─ {title}\n")
    prefix = "     " if last else "  │  "
    for i, answer in enumerate(answers, 1):
        branch = "└" if i == len(answers) else "├"
        out.write(f"{prefix}{branch}─ Part {i}: {answer}\n")


def run_codyssi(input_dir: Path, out: TextIO) -> None:
    """Solve both Codyssi sets from ``input_dir/codyssi``."""
    lab = Path(input_dir) / "codyssi" / "summer_at_the_lab"
    out.write("Summer at the Lab\n")
    lab_problems = [
        ("Handling the Budget", summer_at_the_lab.handling_the_budget),
        ("Sensors and Circuits", summer_at_the_lab.sensors_and_circuits),
        ("Unformatted Readings", summer_at_the_lab.unformatted_readings),
        ("Traversing the Country", summer_at_the_lab.traversing_the_country),
    ]
    for n, (title, solver) in enumerate(lab_problems, 1):
        answers = solver(_read(lab / f"problem{n}.txt"))
        _report(out, f"Problem {n} - {title}", answers, n == len(lab_problems))

    atlantis = Path(input_dir) / "codyssi" / "journey_to_atlantis"
    out.write("\nJourney to Atlantis\n")
    journey = [
        (1, "Compass Calibration", compass_calibration.solve),
        (2, "Absurd Arithmetic", absurd_arithmetic.solve),
        (3, "Supplies in Surplus", supplies_in_surplus.solve),
        (4, "Aeolian Transmissions", aeolian_transmissions.solve),
        (5, "Patron Islands", patron_islands.solve),
        (6, "Lotus Scramble", lotus_scramble.solve),
        (7, "Siren Disruption", siren_disruption.solve),
        (8, "Risky Shortcut", risky_shortcut.solve),
        (9, "Windy Bargain", windy_bargain.solve),
        (10, "Cyclops Chaos", cyclops_chaos.solve),
        (11, "Games in a Storm", games_in_a_storm.solve),
        (13, "Laestrygonian Guards", laestrygonian_guards.solve),
    ]
    for n, title, solver in journey:
        _report(out, f"Problem {n} - {title}", solver(_read(atlantis / f"problem{n}.txt")))
    crafting = crucial_crafting.solve(_read(atlantis / "problem14.txt"))
    _report(out, "Problem 14 - Crucial Crafting", [crafting])


def run_everybody_codes(input_dir: Path, out: TextIO) -> None:
    """Solve the Kingdom of Algorithmia quests from ``input_dir/everybody_codes``."""
    base = Path(input_dir) / "everybody_codes" / "kingdom_of_algorithmia"

    def parts(quest: int) -> list[str]:
        return [_read(base / f"quest{quest}" / f"part{p}.txt") for p in (1, 2, 3)]

    out.write("Kingdom of Algorithmia\n")
    texts = parts(1)
    _report(out, "Quest 1 - The Battle for the Farmlands",
            [farmlands.part1(texts[0]), farmlands.part2(texts[1]), farmlands.part3(texts[2])])
    texts = parts(2)
    _report(out, "Quest 2 - The Runes of Power",
            [runes_of_power.part1(texts[0]), runes_of_power.part2(texts[1]),
             runes_of_power.part3(texts[2])])
    texts = parts(3)
    _report(out, "Quest 3 - Mining Maestro",
            [mining_maestro.part1(texts[0]), mining_maestro.part2(texts[1]),
             mining_maestro.part3(texts[2])])
    texts = parts(4)
    _report(out, "Quest 4 - Royal Smith's Puzzle",
            [smiths_puzzle.part1(texts[0]), smiths_puzzle.part2(texts[1]),
             smiths_puzzle.part3(texts[2])])
    floors = [clap_dance.parse_dance_floor(t) for t in parts(5)]
    _report(out, "Quest 5 - Pseudo-Random Clap Dance",
            [clap_dance.part1(floors[0], 10), clap_dance.part2(floors[1], 2024),
             clap_dance.part3(floors[2])])
    texts = parts(6)
    _report(out, "Quest 6 - The Tree of Titans",
            [tree_of_titans.part1(texts[0]), tree_of_titans.part2(texts[1]),
             tree_of_titans.part3(texts[2])])
    quest7 = base / "quest7"
    first = racing.rank_device_plans(
        racing.parse_devices(_read(quest7 / "part1.txt")), ["="], 10
    )
    second = racing.rank_device_plans(
        racing.parse_devices(_read(quest7 / "part2.txt")),
        racing.parse_track(_read(quest7 / "part2_track.txt")),
        10,
    )
    third = racing.winning_plans_count(
        _read(quest7 / "part3.txt"), _read(quest7 / "part3_track.txt")
    )
    _report(out, "Quest 7 - Not Fast but Furious", [first, second, third])


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen puzzle set and print its answers."""
    parser = argparse.ArgumentParser(prog="dsapuzzles")
    parser.add_argument(
        "set", nargs="?", choices=("everybody_codes", "codyssi"), default="everybody_codes"
    )
    parser.add_argument("--input", default="input", help="directory holding puzzle inputs")
    args = parser.parse_args(argv)
    runner = run_codyssi if args.set == "codyssi" else run_everybody_codes
    try:
        runner(Path(args.input), sys.stdout)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())