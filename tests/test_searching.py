import pytest

from sigtalk.searching import (
    compare,
    compare_bytes,
    find_byte,
    find_char,
    find_last_char,
    find_substring,
)


def test_find_substring_source_example():
    haystack = "Hello how are you doing ?"
    index = find_substring(haystack, "?", 25)
    assert haystack[index:] == "?"


def test_find_substring_empty_needle_is_zero():
    assert find_substring("abc", "", 0) == 0


def test_find_substring_zero_limit_finds_nothing():
    assert find_substring("abc", "a", 0) is None


def test_find_substring_must_fit_within_limit():
    haystack = "Hello how are you doing ?"
    assert find_substring(haystack, "?", 24) is None


def test_find_substring_returns_first_match():
    haystack = "abcabc"
    index = find_substring(haystack, "bc", len(haystack))
    assert haystack[index:index + 2] == "bc"
    assert haystack.index("bc") == index


def test_find_substring_missing():
    assert find_substring("abc", "zz", 3) is None


def test_find_substring_negative_limit():
    with pytest.raises(ValueError):
        find_substring("abc", "a", -1)


def test_find_char_terminator_is_end():
    text = ",,fsf,sd, "
    assert find_char(text, "\0") == len(text)


def test_find_char_first_occurrence():
    text = "a,b,c"
    index = find_char(text, ",")
    assert text[index] == ","
    assert "," not in text[:index]


def test_find_char_missing():
    assert find_char("abc", "z") is None


def test_find_last_char_source_example():
    text = ",Hello world, hey!"
    index = find_last_char(text, ",")
    assert text[index:] == ", hey!"


def test_find_last_char_terminator_is_end():
    assert find_last_char("abc", "\0") == len("abc")


def test_find_last_char_missing():
    assert find_last_char("abc", "z") is None


def test_find_char_rejects_long_char():
    with pytest.raises(ValueError):
        find_char("abc", "ab")


def test_compare_source_example_sign():
    assert compare("Hello", "HelAo", 15) > 0
    assert compare("HelAo", "Hello", 15) < 0


def test_compare_is_difference_of_codes():
    assert compare("Hello", "HelAo", 15) == ord("l") - ord("A")


def test_compare_equal_strings_beyond_length():
    assert compare("same", "same", 100) == 0


def test_compare_prefix_shorter_is_smaller():
    assert compare("abc", "abcd", 10) == -ord("d")


def test_compare_respects_limit():
    assert compare("abcX", "abcY", 3) == 0


def test_compare_bytes_source_example():
    assert compare_bytes(b"abcdEf", b"abcdef", 5) == ord("E") - ord("e")


def test_compare_bytes_equal_prefix():
    assert compare_bytes(b"abcdEf", b"abcdef", 4) == 0
    assert compare_bytes(b"x", b"y", 0) == 0


def test_compare_bytes_limit_too_long():
    with pytest.raises(ValueError):
        compare_bytes(b"ab", b"abc", 3)


def test_find_byte_source_example():
    data = b"http://www.tutorialspoint.com"
    index = find_byte(data, ord("."), len(data))
    assert data[index:] == b".tutorialspoint.com"


def test_find_byte_value_taken_modulo_256():
    data = b"xyz"
    assert find_byte(data, ord("y") + 256, len(data)) == find_byte(data, ord("y"), len(data))


def test_find_byte_outside_limit():
    assert find_byte(b"abc", ord("c"), 2) is None


def test_find_byte_limit_too_long():
    with pytest.raises(ValueError):
        find_byte(b"abc", ord("a"), 4)