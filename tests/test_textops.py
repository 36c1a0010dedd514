import pytest

from tetrofill.textops import (
    delete_char,
    find,
    find_bounded,
    find_char,
    join,
    rfind_char,
    span_until,
    split,
    substring,
    trim,
    trim_char,
)


def test_split_drops_empty_runs():
    assert split("**hello*fellow***students*", "*") == ["hello", "fellow", "students"]


def test_split_of_only_separators_is_empty():
    assert split("*****", "*") == []


def test_split_without_separator_keeps_whole():
    assert split("tetromino", "*") == ["tetromino"]


def test_split_parts_rejoin_when_single_separators():
    text = "a b c d"
    assert " ".join(split(text, " ")) == text


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a--b", "--")


def test_trim_strips_blanks():
    assert trim(" \t\n  Hello World \n\t ") == "Hello World"


def test_trim_all_blanks_gives_empty():
    assert trim(" \n\t ") == ""


def test_trim_keeps_inner_blanks():
    assert trim("a \t b") == "a \t b"


def test_trim_char():
    assert trim_char("xxabcxx", "x") == "abc"
    assert trim_char("xxxx", "x") == ""


def test_trim_char_is_idempotent():
    once = trim_char("--a-b--", "-")
    assert trim_char(once, "-") == once


def test_delete_char_removes_every_occurrence():
    result = delete_char("a.b..c.", ".")
    assert "." not in result
    assert result == "abc"


def test_substring():
    assert substring("Hello World", 6, 5) == "World"
    assert substring("abc", 1, 0) == ""


def test_substring_out_of_range():
    with pytest.raises(IndexError):
        substring("abc", 2, 5)


def test_join_round_trip_with_substring():
    a, b = "tetro", "mino"
    joined = join(a, b)
    assert substring(joined, 0, len(a)) == a
    assert substring(joined, len(a), len(b)) == b


def test_span_until():
    text = "abc,def"
    assert span_until(text, ",") == text.index(",")
    assert span_until("abcdef", ",") == len("abcdef")


def test_find_empty_needle_is_start():
    assert find("haystack", "") == 0


def test_find_locates_first_occurrence():
    text = "abcabcabd"
    position = find(text, "abd")
    assert text[position:].startswith("abd")
    assert "abd" not in text[:position + 2]


def test_find_missing():
    assert find("abcabc", "abd") is None


def test_find_bounded_inside_limit():
    text = "Foo Bar Baz"
    position = find_bounded(text, "Bar", len(text))
    assert text[position:position + 3] == "Bar"


def test_find_bounded_needle_crossing_limit():
    assert find_bounded("Foo Bar Baz", "Bar", 6) is None


def test_find_bounded_empty_needle():
    assert find_bounded("abc", "", 0) == 0


def test_find_bounded_agrees_with_find_when_unbounded():
    text = "mississippi"
    assert find_bounded(text, "ssip", 100) == find(text, "ssip")


def test_find_char_first_and_nul():
    text = "banana"
    position = find_char(text, "n")
    assert text[position] == "n"
    assert "n" not in text[:position]
    assert find_char(text, "\0") == len(text)
    assert find_char(text, "z") is None


def test_rfind_char_last_and_nul():
    text = "banana"
    position = rfind_char(text, "n")
    assert text[position] == "n"
    assert "n" not in text[position + 1:]
    assert rfind_char(text, "\0") == len(text)
    assert rfind_char(text, "z") is None


def test_find_char_rejects_empty():
    with pytest.raises(ValueError):
        find_char("abc", "")