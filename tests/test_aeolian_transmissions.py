import re

import pytest

from dsapuzzles.codyssi.aeolian_transmissions import (
    compress,
    compress_losslessly,
    message_size,
    solve,
)


def _expand(encoded):
    return "".join(c * int(n) for n, c in re.findall(r"(\d+)(\D)", encoded))


def test_letter_sizes_follow_alphabet_positions():
    assert message_size("A") == 1
    assert message_size("Z") == 26


def test_digit_sizes_are_their_values():
    assert message_size("0") == 0
    assert message_size("12") == message_size("3")


def test_size_is_additive():
    assert message_size("ABC9") == message_size("AB") + message_size("C9")


def test_unsupported_character():
    with pytest.raises(ValueError):
        message_size("a")


def test_short_message_compresses_to_its_length():
    message = "ABCDEFG"
    assert compress(message) == str(len(message))


def test_compress_keeps_a_tenth_at_each_end():
    message = "ABCDEFGHIJKLMNOPQRST"
    compressed = compress(message)
    assert compressed.startswith(message[:2])
    assert compressed.endswith(message[-2:])
    assert compressed[2:-2] == str(len(message) - 4)


def test_compress_losslessly_pinned():
    assert compress_losslessly("AAABBC") == "3A2B1C"


@pytest.mark.parametrize("message", ["A", "ZZZZ", "ABABAB", "QQWWWEEEE"])
def test_compress_losslessly_round_trip(message):
    assert _expand(compress_losslessly(message)) == message


def test_compress_losslessly_empty():
    with pytest.raises(ValueError):
        compress_losslessly("")


def test_solve_sums_each_measure():
    lines = ["AAABBC", "ABCDEFGHIJKL"]
    result = solve("\n".join(lines) + "\n")
    assert result == (
        sum(message_size(line) for line in lines),
        sum(message_size(compress(line)) for line in lines),
        sum(message_size(compress_losslessly(line)) for line in lines),
    )