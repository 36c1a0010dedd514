import io

import pytest

from tetrofill.output import put_char, put_endl, put_nbr, put_str


def test_put_char_to_stream():
    buf = io.StringIO()
    put_char("x", buf)
    put_char("y", buf)
    assert buf.getvalue() == "xy"


def test_put_char_defaults_to_stdout(capsys):
    put_char("z")
    assert capsys.readouterr().out == "z"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    buf = io.StringIO()
    put_str("hello world", buf)
    assert buf.getvalue() == "hello world"


def test_put_str_none_writes_nothing():
    buf = io.StringIO()
    put_str(None, buf)
    assert buf.getvalue() == ""


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    assert buf.getvalue() == "line" + "\n"


def test_put_endl_none_writes_nothing(capsys):
    put_endl(None)
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("n", [0, 9, 10, -1, 123456789, 2147483647])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n


def test_put_nbr_most_negative_int():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_put_nbr_defaults_to_stdout(capsys):
    put_nbr(-42)
    assert capsys.readouterr().out == "-42"