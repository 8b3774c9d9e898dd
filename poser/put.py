"""Writing text and numbers to standard output or a given stream."""

import subprocess
import sys
from typing import Any, Optional, TextIO

from .fmt import format_args
from .numfmt import i64_to_str, u64_to_str

CLEAR_SCREEN = "\033[2J"


def _out(stream: Optional[TextIO]) -> TextIO:
    return stream if stream is not None else sys.stdout


def put_s(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; nothing is written for ``None`` or an empty string."""
    if not text:
        return
    _out(stream).write(text)


def put_n(stream: Optional[TextIO] = None) -> None:
    """Write a newline."""
    put_s("\n", stream)


def put_sn(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    put_s(text, stream)
    put_n(stream)


def put_i64(value: int, stream: Optional[TextIO] = None) -> None:
    """Write a signed 64-bit integer in decimal."""
    put_s(i64_to_str(value), stream)


def put_i64n(value: int, stream: Optional[TextIO] = None) -> None:
    """Write a signed 64-bit integer and a newline."""
    put_i64(value, stream)
    put_n(stream)


def put_u64(value: int, stream: Optional[TextIO] = None) -> None:
    """Write an unsigned 64-bit integer in decimal."""
    put_s(u64_to_str(value), stream)


def put_u64n(value: int, stream: Optional[TextIO] = None) -> None:
    """Write an unsigned 64-bit integer and a newline."""
    put_u64(value, stream)
    put_n(stream)


def put_f(fmt: Any, *args: Any, stream: Optional[TextIO] = None) -> None:
    """Write ``fmt`` with ``{i}`` placeholders replaced by ``args``."""
    put_s(format_args(fmt, *args), stream)


def put_fn(fmt: Any, *args: Any, stream: Optional[TextIO] = None) -> None:
    """Like :func:`put_f`, followed by a newline."""
    put_f(fmt, *args, stream=stream)
    put_n(stream)


def put_clr(stream: Optional[TextIO] = None) -> None:
    """Clear the terminal: ``cls`` on Windows, an ANSI clear sequence elsewhere."""
    if sys.platform.startswith("win"):
        subprocess.run(["cmd.exe", "/c", "cls"], check=False)
    else:
        put_s(CLEAR_SCREEN, stream)