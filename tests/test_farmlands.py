import pytest

from dsapuzzles.everybody_codes.farmlands import (
    battle_cost,
    enemy_potion_cost,
    part1,
    part2,
    part3,
)


def test_part1_example():
    assert part1("ABBAC") == 5


def test_part2_example():
    assert part2("AxBCDDCAxD") == 28


def test_part3_example():
    assert part3("xBxAAABCDxCC") == 30


def test_trailing_newline_is_ignored():
    assert part1("ABBAC\n") == part1("ABBAC")


def test_potion_table():
    assert [enemy_potion_cost(e) for e in "ABCD"] == [0, 1, 3, 5]


def test_empty_group_costs_nothing():
    assert battle_cost(["x", "x", "x"]) == 0


def test_lone_fighter_gets_no_bonus():
    assert battle_cost(["D", "x"]) == enemy_potion_cost("D")
    assert battle_cost(["x", "C", "x"]) == enemy_potion_cost("C")


def test_all_empty_pairs():
    assert part2("xx" * 4) == 0


def test_invalid_enemy():
    with pytest.raises(ValueError):
        enemy_potion_cost("Z")
    with pytest.raises(ValueError):
        part1("AQ")