"""A growable string that accepts text and integers."""

from typing import Union

from .numfmt import i64_to_str, u64_to_str


class HStr:
    """A growable string built by appending text and numbers."""

    __hash__ = None  # mutable

    def __init__(self, text: str = "") -> None:
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        end = text.find("\0")
        self._text = text if end < 0 else text[:end]

    @classmethod
    def from_i64(cls, value: int) -> "HStr":
        """Create from the decimal form of a signed 64-bit integer."""
        return cls(i64_to_str(value))

    @classmethod
    def from_u64(cls, value: int) -> "HStr":
        """Create from the decimal form of an unsigned 64-bit integer."""
        return cls(u64_to_str(value))

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"HStr({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HStr):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def append(self, other: Union["HStr", str]) -> None:
        """Append another HStr or a string."""
        if isinstance(other, HStr):
            self._text += other._text
        elif isinstance(other, str):
            self._text += HStr(other)._text
        else:
            raise TypeError(f"expected HStr or str, got {type(other).__name__}")

    def append_i64(self, value: int) -> None:
        """Append the decimal form of a signed 64-bit integer."""
        self._text += i64_to_str(value)

    def append_u64(self, value: int) -> None:
        """Append the decimal form of an unsigned 64-bit integer."""
        self._text += u64_to_str(value)