import pytest

from dsapuzzles.codyssi.supplies_in_surplus import solve


def test_overlapping_ranges():
    assert solve("1-3 2-5\n10-10 11-12") == (10, 8, 8)


def test_disjoint_ranges_count_the_same_in_first_two_parts():
    total, per_pile, _ = solve("1-2 5-6\n20-29 40-41")
    assert total == per_pile


def test_identical_piles_pair_equals_single_pile():
    total, per_pile, best_pair = solve("3-7 3-7\n3-7 3-7")
    assert per_pile == total // 2
    assert best_pair == per_pile // 2


def test_invariants_hold():
    total, per_pile, best_pair = solve("1-10 5-15\n12-20 30-31\n0-3 2-4")
    assert per_pile <= total
    assert best_pair <= per_pile


def test_single_pile_raises():
    with pytest.raises(ValueError):
        solve("1-3 4-6")


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        solve("1-3\n4-6 7-8")