"""A mutable string type with in-place editing, searching and printing."""

import sys
from typing import Optional, TextIO, Union

from . import chars, edit, search
from .edit import FStrError, StrError

TextLike = Union["FStr", str]


def _coerce(buf: Optional[TextLike]) -> str:
    if buf is None:
        raise FStrError(StrError.NULL_STRING_ARG, "string argument is missing")
    if isinstance(buf, FStr):
        return buf._text
    if isinstance(buf, str):
        return buf
    raise TypeError(f"expected FStr or str, got {type(buf).__name__}")


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


class FStr:
    """A mutable string whose operations edit it in place."""

    __hash__ = None  # mutable

    def __init__(self, text: TextLike = "") -> None:
        self._text = _coerce(text)

    @classmethod
    def from_length(cls, length: int, fill: str) -> "FStr":
        """Create a string of ``length`` copies of ``fill``; non-positive lengths give ''."""
        _check_char(fill)
        if length <= 0:
            return cls("")
        return cls(fill * length)

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"FStr({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FStr):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def copy(self) -> "FStr":
        """Return an independent copy."""
        return FStr(self._text)

    def append(self, buf: TextLike) -> None:
        """Append a string."""
        self._text += _coerce(buf)

    def append_chr(self, c: str) -> None:
        """Append a single character."""
        _check_char(c)
        self._text += c

    def insert(self, index: int, add: TextLike) -> None:
        """Insert ``add`` before position ``index``."""
        self._text = edit.insert(self._text, index, _coerce(add))

    def index_of(self, sub: TextLike) -> Optional[int]:
        """Index of the first occurrence of ``sub``, or None."""
        return search.index_of(self._text, _coerce(sub))

    def index_of_chr(self, c: str) -> Optional[int]:
        """Index of the first occurrence of character ``c``, or None."""
        _check_char(c)
        found = self._text.find(c)
        return None if found < 0 else found

    def count(self, sub: TextLike) -> int:
        """Count non-overlapping occurrences of ``sub``."""
        return search.count(self._text, _coerce(sub))

    def count_chr(self, c: str) -> int:
        """Count occurrences of character ``c``."""
        _check_char(c)
        return self._text.count(c)

    def remove(self, buf: TextLike) -> None:
        """Remove every occurrence of ``buf``."""
        self._text = search.remove_all(self._text, _coerce(buf))

    def remove_chr(self, c: str) -> None:
        """Remove every occurrence of character ``c``."""
        _check_char(c)
        self._text = self._text.replace(c, "")

    def remove_chrs(self, *args: str) -> None:
        """Remove every occurrence of each given character."""
        for c in args:
            self.remove_chr(c)

    def remove_at(self, index: int, length: int) -> None:
        """Remove ``length`` characters at ``index``, clamped to the end."""
        self._text = edit.remove_at(self._text, index, length)

    def replace(self, old: TextLike, new: TextLike) -> None:
        """Replace occurrences of ``old`` with ``new``."""
        self._text = search.replace_all(self._text, _coerce(old), _coerce(new))

    def replace_chr(self, old: str, new: str) -> None:
        """Replace every occurrence of character ``old`` with ``new``."""
        _check_char(old)
        _check_char(new)
        self._text = self._text.replace(old, new)

    def set_chr(self, index: int, c: str) -> None:
        """Set the character at ``index``."""
        _check_char(c)
        if not 0 <= index < len(self._text):
            raise FStrError(
                StrError.INDEX_OUT_OF_BOUNDS,
                f"index {index} is outside a string of length {len(self._text)}",
            )
        self._text = self._text[:index] + c + self._text[index + 1:]

    def substr(self, start: int, length: int) -> "FStr":
        """Return a new string of ``length`` characters from ``start``."""
        return FStr(edit.substr(self._text, start, length))

    def terminate(self, c: str) -> None:
        """Cut the string off at the first occurrence of ``c``, if any."""
        found = self.index_of_chr(c)
        if found is not None:
            self._text = self._text[:found]

    def overwrite(self, index: int, buf: TextLike) -> None:
        """Write ``buf`` over the string at ``index``, extending with spaces."""
        self._text = edit.overwrite(self._text, index, _coerce(buf))

    def pad(self, target_length: int, fill: str, side: int) -> None:
        """Pad to ``target_length``: side <0 left, >0 right, 0 both."""
        self._text = edit.pad(self._text, target_length, fill, side)

    def trim(self, side: int) -> None:
        """Strip whitespace: side <0 left, >0 right, 0 both."""
        self._text = edit.trim(self._text, side)

    def to_lower(self) -> None:
        """Lower-case the ASCII letters."""
        self._text = chars.to_lower(self._text)

    def to_upper(self) -> None:
        """Upper-case the ASCII letters."""
        self._text = chars.to_upper(self._text)

    def invert_case(self) -> None:
        """Swap the case of the ASCII letters."""
        self._text = chars.invert_case(self._text)

    def reverse(self) -> None:
        """Reverse the string."""
        self._text = self._text[::-1]

    def clear(self) -> None:
        """Make the string empty."""
        self._text = ""

    def starts_with(self, sub: TextLike) -> bool:
        """True if the string begins with ``sub``."""
        return search.starts_with(self._text, _coerce(sub))

    def starts_with_chr(self, c: str) -> bool:
        """True if the first character is ``c``."""
        _check_char(c)
        return bool(self._text) and self._text[0] == c

    def as_c(self) -> bytes:
        """Return the contents as NUL-terminated UTF-8 bytes."""
        return self._text.encode("utf-8") + b"\0"

    def print(self, stream: Optional[TextIO] = None) -> None:
        """Write the string to ``stream`` (standard output by default)."""
        (stream or sys.stdout).write(self._text)

    def println(self, stream: Optional[TextIO] = None) -> None:
        """Write the string and a newline."""
        out = stream or sys.stdout
        out.write(self._text)
        out.write("\n")

    def num_text(self) -> str:
        """Character codes in decimal, each followed by a space."""
        return "".join(f"{ord(c)} " for c in self._text)

    def hex_text(self) -> str:
        """Character codes in hexadecimal, each followed by a space."""
        return "".join(f"0x{ord(c):x} " for c in self._text)

    def bin_text(self) -> str:
        """Character codes as 8-bit binary groups, each followed by a space."""
        return "".join(f"{ord(c):08b} " for c in self._text)