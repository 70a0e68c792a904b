import math

import pytest

from dsapuzzles.everybody_codes.racing import (
    all_plans,
    parse_devices,
    parse_track,
    rank_device_plans,
    run_laps,
    winning_plans_count,
)

DEVICES = "A:+,-,=,=\nB:+,=,-,+\nC:=,-,+,+\nD:=,=,=,+"
TRACK = "S+=\n- =\n=+="


def test_rank_example():
    assert rank_device_plans(parse_devices(DEVICES), ["="], 10) == "BDCA"


def test_parse_devices():
    assert parse_devices("A:+,-")["A"] == ["+", "-"]


def test_parse_devices_rejects_bad_line():
    with pytest.raises(ValueError):
        parse_devices("A+,-")


def test_parse_track_loops_back_to_start():
    track = parse_track(TRACK)
    assert track[-1] == "S"
    assert len(track) == 8
    assert track.count("S") == 1


def test_run_laps_stops_early():
    full = run_laps(["="], ["="], 10)
    early = run_laps(["="], ["="], 10, 25)
    assert early < full
    assert early >= 25


def test_all_plans_distinct_and_complete():
    plans = all_plans({"+": 5, "-": 3, "=": 3})
    assert len(plans) == math.factorial(11) // (
        math.factorial(5) * math.factorial(3) * math.factorial(3)
    )
    assert len({tuple(p) for p in plans}) == len(plans)


def test_winning_plans_in_range():
    count = winning_plans_count("A:=", TRACK)
    assert 0 <= count <= len(all_plans({"+": 5, "-": 3, "=": 3}))


def test_empty_plan_rejected():
    with pytest.raises(ValueError):
        run_laps(["="], [], 1)