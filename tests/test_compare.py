import pytest

from tetrofill.compare import memcmp, strcmp, strequ, strncmp, strnequ


def test_strcmp_equal_strings():
    assert strcmp("fillit", "fillit") == 0


def test_strcmp_orders_by_first_difference():
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0


def test_strcmp_prefix_sorts_first():
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("abc", "ab") == ord("c")


@pytest.mark.parametrize(
    "a, b", [("", "x"), ("hello", "help"), ("Z", "a"), ("same", "same")]
)
def test_strcmp_is_antisymmetric(a, b):
    assert strcmp(a, b) == -strcmp(b, a)


def test_strcmp_sign_matches_python_ordering():
    words = ["pear", "apple", "apricot", "ap", "banana"]
    for a in words:
        for b in words:
            result = strcmp(a, b)
            assert (result < 0) == (a < b)
            assert (result == 0) == (a == b)


def test_strncmp_ignores_characters_past_n():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) == strcmp("abcX", "abcY")


def test_strncmp_zero_length_is_equal():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_shorter_string_within_n():
    assert strncmp("ab", "abc", 10) == strcmp("ab", "abc")
    assert strncmp("ab", "abc", 10) < 0


def test_strequ():
    assert strequ("piece", "piece") is True
    assert strequ("piece", "pieces") is False


def test_strequ_none_is_never_equal():
    assert strequ(None, "a") is False
    assert strequ("a", None) is False
    assert strequ(None, None) is False


def test_strnequ():
    assert strnequ("tetromino", "tetris", 4) is True
    assert strnequ("tetromino", "tetris", 5) is False
    assert strnequ(None, "tetris", 4) is False


def test_memcmp_bytes_are_unsigned():
    assert memcmp(b"\x01", b"\xff", 1) == 1 - 255
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_stops_at_n():
    assert memcmp(b"abcd", b"abce", 3) == 0
    assert memcmp(b"abcd", b"abce", 4) < 0


def test_memcmp_does_not_stop_at_nul():
    assert memcmp(b"a\x00b", b"a\x00c", 3) < 0


def test_memcmp_accepts_text():
    assert memcmp("abc", "abc", 3) == 0
    assert memcmp("abc", "abd", 3) == strcmp("abc", "abd")


def test_memcmp_zero_length():
    assert memcmp(b"x", b"y", 0) == 0


def test_memcmp_rejects_length_past_end():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memcmp_rejects_negative_length():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"ab", -1)