import io

import pytest

from pipework.output import put_char, put_endl, put_number, put_str


def test_put_char_writes_one_character():
    out = io.StringIO()
    put_char("a", out)
    assert out.getvalue() == "a"


def test_put_char_accepts_code():
    out = io.StringIO()
    put_char(ord("z"), out)
    assert out.getvalue() == "z"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("hello, world!", out)
    assert out.getvalue() == "hello, world!"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("Hello, world!", out)
    assert out.getvalue() == "Hello, world!\n"


def test_put_endl_none_writes_newline_only():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == "\n"


@pytest.mark.parametrize("number", [0, 7, 42, -1, 2147483647, -2147483648])
def test_put_number_round_trip(number):
    out = io.StringIO()
    put_number(number, out)
    assert int(out.getvalue()) == number


def test_put_number_extremes():
    out = io.StringIO()
    put_number(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_put_number_rejects_text():
    with pytest.raises(TypeError):
        put_number("12", io.StringIO())


def test_writes_accumulate_in_order():
    out = io.StringIO()
    put_str("n=", out)
    put_number(12, out)
    put_endl("!", out)
    assert out.getvalue() == "n=12!\n"