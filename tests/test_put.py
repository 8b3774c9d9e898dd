import io
from unittest import mock

import pytest

from poser.put import (
    CLEAR_SCREEN,
    put_clr,
    put_f,
    put_fn,
    put_i64,
    put_i64n,
    put_n,
    put_s,
    put_sn,
    put_u64,
    put_u64n,
)


@pytest.fixture
def out():
    return io.StringIO()


def test_put_s(out):
    put_s("hello", out)
    assert out.getvalue() == "hello"


def test_put_s_empty_and_none_write_nothing(out):
    put_s("", out)
    put_s(None, out)
    assert out.getvalue() == ""


def test_put_n(out):
    put_n(out)
    assert out.getvalue() == "\n"


def test_put_sn(out):
    put_sn("line", out)
    assert out.getvalue() == "line\n"


def test_put_i64(out):
    put_i64(-123, out)
    assert out.getvalue() == str(-123)


def test_put_i64n(out):
    put_i64n(0, out)
    assert out.getvalue() == "0\n"


def test_put_u64_max(out):
    put_u64(2**64 - 1, out)
    assert out.getvalue() == str(2**64 - 1)


def test_put_u64n(out):
    put_u64n(5, out)
    assert out.getvalue() == "5\n"


def test_put_u64_rejects_negative(out):
    with pytest.raises(OverflowError):
        put_u64(-1, out)


def test_put_f(out):
    put_f("{0}+{1}", 1, 2, stream=out)
    assert out.getvalue() == "1+2"


def test_put_fn(out):
    put_fn("{0}", 10, stream=out)
    assert out.getvalue() == "10\n"


def test_put_defaults_to_stdout(capsys):
    put_sn("to stdout")
    assert capsys.readouterr().out == "to stdout\n"


def test_put_clr_writes_escape_off_windows(out):
    with mock.patch("sys.platform", "linux"):
        put_clr(out)
    assert out.getvalue() == CLEAR_SCREEN
    assert CLEAR_SCREEN == "\033[2J"