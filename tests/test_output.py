import io

import pytest

from sigtalk.output import put_char, put_endl, put_number, put_str


def test_put_char_string():
    buf = io.StringIO()
    put_char("z", buf)
    assert buf.getvalue() == "z"


def test_put_char_code_point():
    buf = io.StringIO()
    put_char(ord("A"), buf)
    assert buf.getvalue() == "A"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    buf = io.StringIO()
    put_str("hello world", buf)
    assert buf.getvalue() == "hello world"


def test_put_str_empty():
    buf = io.StringIO()
    put_str("", buf)
    assert buf.getvalue() == ""


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    assert buf.getvalue() == "line\n"


def test_put_endl_empty():
    buf = io.StringIO()
    put_endl("", buf)
    assert buf.getvalue() == "\n"


@pytest.mark.parametrize("n", [0, 7, 42, -42, 2147483647, -2147483648])
def test_put_number_decimal(n):
    buf = io.StringIO()
    put_number(n, buf)
    assert buf.getvalue() == str(n)
    assert int(buf.getvalue()) == n


def test_put_number_negative_has_one_minus():
    buf = io.StringIO()
    put_number(-5, buf)
    assert buf.getvalue().count("-") == 1


def test_writes_accumulate():
    buf = io.StringIO()
    put_str("a", buf)
    put_char("b", buf)
    put_number(1, buf)
    put_endl("c", buf)
    assert buf.getvalue() == "ab1c\n"


def test_default_stream_is_stdout(capsys):
    put_str("to stdout")
    put_endl("!")
    assert capsys.readouterr().out == "to stdout!\n"