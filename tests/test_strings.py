import pytest

from dsapuzzles.leetcode.strings import (
    group_anagrams,
    is_anagram,
    is_palindrome,
    is_valid,
    length_of_longest_substring,
    longest_common_prefix,
    roman_to_int,
    str_str,
)


@pytest.mark.parametrize(
    "numeral, expected", [("III", 3), ("LVIII", 58), ("MCMXCIV", 1994)]
)
def test_roman_to_int(numeral, expected):
    assert roman_to_int(numeral) == expected


def test_roman_to_int_rejects_unknown_numeral():
    with pytest.raises(ValueError):
        roman_to_int("XIQ")


def test_longest_common_prefix():
    assert longest_common_prefix(["flower", "flow", "flight"]) == "fl"


def test_longest_common_prefix_none_shared():
    assert longest_common_prefix(["dog", "racecar", "car"]) == ""


def test_longest_common_prefix_requires_strings():
    with pytest.raises(ValueError):
        longest_common_prefix([])


def test_is_palindrome_false():
    assert not is_palindrome("abcd")


def test_is_palindrome_simple():
    assert is_palindrome("abba")


def test_is_palindrome_sentence():
    assert is_palindrome("A man, a plan, a canal: Panama")


@pytest.mark.parametrize(
    "text, expected",
    [("()", True), ("()[]{}", True), ("(]", False), ("([])", True)],
)
def test_is_valid(text, expected):
    assert is_valid(text) is expected


def test_is_anagram_true():
    assert is_anagram("anagram", "nagaram")


def test_is_anagram_false():
    assert not is_anagram("rat", "car")


def test_is_anagram_different_lengths():
    assert not is_anagram("ab", "abc")


def test_is_anagram_rejects_uppercase():
    with pytest.raises(ValueError):
        is_anagram("Ab", "bA")


def test_str_str_found_at_start():
    assert str_str("sadbutsad", "sad") == 0


def test_str_str_single_char():
    assert str_str("a", "a") == 0


def test_str_str_missing():
    assert str_str("leetcode", "leeto") == -1


def test_str_str_needle_longer():
    assert str_str("ab", "abc") == -1


def test_str_str_empty_needle():
    with pytest.raises(ValueError):
        str_str("abc", "")


@pytest.mark.parametrize(
    "text, expected", [("abcabcbb", 3), ("pwwkew", 3), ("au", 2), (" ", 1)]
)
def test_length_of_longest_substring(text, expected):
    assert length_of_longest_substring(text) == expected


def test_group_anagrams():
    actual = group_anagrams(["eat", "tea", "tan", "ate", "nat", "bat"])
    expected = [["eat", "tea", "ate"], ["tan", "nat"], ["bat"]]
    assert len(actual) == len(expected)
    for group in expected:
        assert group in actual


def test_group_anagrams_rejects_non_letters():
    with pytest.raises(ValueError):
        group_anagrams(["ab1"])