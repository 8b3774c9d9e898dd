"""Positional string editing: removal, overwrite, padding, trimming, slicing and insertion."""

from enum import IntEnum
from itertools import dropwhile

from .chars import is_trim_char


class StrError(IntEnum):
    """Error codes reported by string operations."""

    NONE = 0
    INDEX_OUT_OF_BOUNDS = 1
    ALLOC_FAILED = 2
    REALLOC_FAILED = 3
    NULL_STRING_ARG = 4
    INCORRECT_CHAR_POINTER = 5


class FStrError(Exception):
    """Raised when a string operation fails; ``code`` holds the :class:`StrError`."""

    def __init__(self, code: StrError, message: str) -> None:
        super().__init__(message)
        self.code = StrError(code)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.name}: {self.message}"


def _out_of_bounds(message: str) -> FStrError:
    return FStrError(StrError.INDEX_OUT_OF_BOUNDS, message)


def _check_index(name: str, value: int) -> None:
    if value < 0:
        raise _out_of_bounds(f"{name} must not be negative, got {value}")


def remove_at(text: str, index: int, length: int) -> str:
    """Remove ``length`` characters starting at ``index``.

    The length is clamped to the end of the string. An empty string is
    returned unchanged; an index past the end is an error.
    """
    if not text:
        return text
    _check_index("index", index)
    _check_index("length", length)
    if index >= len(text):
        raise _out_of_bounds(f"index {index} is outside a string of length {len(text)}")
    length = min(length, len(text) - index)
    return text[:index] + text[index + length:]


def overwrite(text: str, index: int, buf: str) -> str:
    """Write ``buf`` over ``text`` at ``index``, extending with spaces if needed."""
    _check_index("index", index)
    final_size = max(len(text), index + len(buf))
    widened = text.ljust(final_size, " ")
    return widened[:index] + buf + widened[index + len(buf):]


def pad(text: str, target_length: int, fill: str, side: int) -> str:
    """Pad ``text`` with ``fill`` to ``target_length``.

    ``side`` below zero pads the left, above zero the right, and zero both,
    putting the smaller half on the left.
    """
    if not isinstance(fill, str) or len(fill) != 1:
        raise ValueError(f"fill must be a single character, got {fill!r}")
    if target_length <= len(text):
        raise _out_of_bounds(
            f"target length {target_length} does not exceed current length {len(text)}"
        )
    diff = target_length - len(text)
    if side < 0:
        return fill * diff + text
    if side == 0:
        left = fill * (diff // 2)
        return pad(left + text, target_length, fill, 1) if diff - diff // 2 else left + text
    return text + fill * diff


def _trim_left(text: str) -> str:
    return "".join(dropwhile(is_trim_char, text))


def trim(text: str, side: int) -> str:
    """Strip whitespace: ``side`` below zero trims the left, above zero the right, zero both."""
    if side <= 0:
        text = _trim_left(text)
    if side >= 0:
        text = _trim_left(text[::-1])[::-1]
    return text


def substr(text: str, start: int, length: int) -> str:
    """Return ``length`` characters of ``text`` beginning at ``start``."""
    _check_index("start", start)
    _check_index("length", length)
    if start >= len(text):
        raise _out_of_bounds(f"start {start} is outside a string of length {len(text)}")
    if start + length > len(text):
        raise _out_of_bounds(
            f"substring of length {length} at {start} runs past the end of the string"
        )
    return text[start:start + length]


def insert(text: str, index: int, add: str) -> str:
    """Insert ``add`` before position ``index``; ``len(text)`` appends."""
    if add is None:
        raise FStrError(StrError.NULL_STRING_ARG, "nothing to insert")
    if not add:
        return text
    _check_index("index", index)
    if index > len(text):
        raise _out_of_bounds(f"index {index} is outside a string of length {len(text)}")
    return text[:index] + add + text[index:]