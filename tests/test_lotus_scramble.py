import pytest

from dsapuzzles.codyssi.lotus_scramble import solve


def test_letter_values_follow_alphabet():
    assert solve("a")[1] == 1
    assert solve("A")[1] == 27


def test_clean_line_repairs_to_its_own_value():
    count, value, repaired = solve("abcXYZ")
    assert count == len("abcXYZ")
    assert repaired == value


def test_only_first_line_counts():
    assert solve("ab\ncdef") == solve("ab")


def test_corruption_is_not_counted_but_repaired():
    count, value, repaired = solve("a!")
    assert (count, value) == solve("a")[:2]
    assert repaired == 50


def test_negative_correction_wraps():
    assert solve("!") == (0, 0, 47)


def test_empty_input():
    with pytest.raises(ValueError):
        solve("")