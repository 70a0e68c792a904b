import pytest

from dsapuzzles.everybody_codes.tree_of_titans import (
    build_tree,
    part1,
    part2,
    part3,
    strongest_fruit_path,
)

EXAMPLE = "\n".join(
    [
        "RR:A,B,C",
        "A:D,E",
        "B:F,@",
        "C:G,H",
        "D:@",
        "E:@",
        "F:@",
        "G:@",
        "H:@",
    ]
)


def test_part1_example():
    assert part1(EXAMPLE) == "RRB@"


def test_part2_example():
    assert part2(EXAMPLE) == "RB@"


def test_part3_matches_part2():
    assert part3(EXAMPLE) == part2(EXAMPLE)


def test_build_tree():
    assert build_tree("RR:A,@\nA:@") == {"RR": {"A", "@"}, "A": {"@"}}


def test_build_tree_rejects_bad_line():
    with pytest.raises(ValueError):
        build_tree("RR")


def test_path_ends_in_fruit():
    result = strongest_fruit_path(build_tree(EXAMPLE))
    assert result.startswith("RR") and result.endswith("@")