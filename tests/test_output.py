import io

import pytest

from ftprint.output import main, put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    out = io.StringIO()
    put_char("q", out)
    put_char("r", out)
    assert out.getvalue() == "qr"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_and_endl():
    out = io.StringIO()
    put_str("hello", out)
    put_endl(" there", out)
    assert out.getvalue() == "hello" + " there" + "\n"


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_minimum_int_text():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_default_stream_is_stdout(capsys):
    put_str("abc")
    assert capsys.readouterr().out == "abc"


def test_main_prints_sample(capsys):
    assert main() == 0
    assert capsys.readouterr().out == "13232"