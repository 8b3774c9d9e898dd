"""Placeholder formatting: ``{0}``, ``{1}``... replaced by stringified arguments."""

from typing import Any

from .fstr import FStr
from .hstr import HStr
from .numfmt import I64_MAX, I64_MIN, U64_MAX, i64_to_str, u64_to_str
from .search import replace_all

MAX_ARGS = 15
"""Largest number of arguments a format string may take besides itself."""


class FormatError(Exception):
    """Raised when a value cannot be formatted or too many arguments are given."""


def to_str(value: Any) -> str:
    """Convert a supported value to its text form.

    Strings (and the package's string types) pass through; integers are
    written in decimal. Anything else is rejected.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (FStr, HStr)):
        return str(value)
    if isinstance(value, bool):
        return i64_to_str(int(value))
    if isinstance(value, int):
        if I64_MIN <= value <= I64_MAX:
            return i64_to_str(value)
        if 0 <= value <= U64_MAX:
            return u64_to_str(value)
        raise FormatError(f"integer {value} does not fit in 64 bits")
    raise FormatError(f"unsupported conversion type: {type(value).__name__}")


def format_args(fmt: Any, *args: Any) -> str:
    """Replace ``{i}`` in ``fmt`` with the text of ``args[i]``, in argument order.

    Placeholders are substituted one index after another, so text brought in
    by an earlier argument is itself subject to later substitutions.
    """
    if len(args) > MAX_ARGS:
        raise FormatError(f"at most {MAX_ARGS} arguments are supported, got {len(args)}")
    result = to_str(fmt)
    for index, arg in enumerate(args):
        result = replace_all(result, f"{{{index}}}", to_str(arg))
    return result


def fmt_to_fstr(fmt: Any, *args: Any) -> FStr:
    """Format like :func:`format_args` and return the result as an :class:`FStr`."""
    return FStr(format_args(fmt, *args))