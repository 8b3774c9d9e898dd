"""NUL-terminated string length and comparison."""

from typing import Optional, Union

CString = Union[str, bytes]


def _as_bytes(data: CString) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _terminated(data: CString) -> bytes:
    raw = _as_bytes(data)
    end = raw.find(b"\0")
    return (raw if end < 0 else raw[:end]) + b"\0"


def str_len(data: Optional[CString]) -> int:
    """Length up to the first NUL; ``None`` has length 0."""
    if data is None:
        return 0
    if isinstance(data, str):
        end = data.find("\0")
        return len(data) if end < 0 else end
    return len(_terminated(data)) - 1


def str_cmp(a: CString, b: CString) -> int:
    """Compare byte-wise up to the terminator.

    Returns 0 when equal, otherwise the difference of the first differing
    unsigned bytes.
    """
    for x, y in zip(_terminated(a), _terminated(b)):
        if x != y:
            return x - y
        if x == 0:
            break
    return 0