"""Substring search, counting, removal and replacement."""

from typing import Optional


def index_of(text: str, sub: str) -> Optional[int]:
    """Return the index of the first occurrence of ``sub`` in ``text``, or None.

    An empty ``text`` never contains anything, not even an empty ``sub``.
    """
    if not text or len(sub) > len(text):
        return None
    found = text.find(sub)
    return None if found < 0 else found


def count(text: str, sub: str) -> int:
    """Count the non-overlapping occurrences of ``sub`` in ``text``."""
    if not sub:
        raise ValueError("cannot count an empty substring")
    return text.count(sub)


def remove_all(text: str, sub: str) -> str:
    """Remove every non-overlapping occurrence of ``sub``, scanning left to right."""
    if not sub:
        raise ValueError("cannot remove an empty substring")
    return text.replace(sub, "")


def replace_all(text: str, old: str, new: str) -> str:
    """Replace occurrences of ``old`` with ``new``.

    After each replacement the scan resumes ``len(new)`` characters past the
    start of the previous scan window, so replacement text may be scanned again.
    """
    if not old:
        raise ValueError("cannot replace an empty substring")
    if not new:
        return remove_all(text, old)

    start = 0
    while start <= len(text):
        found = index_of(text[start:], old)
        if found is None:
            break
        at = start + found
        text = text[:at] + new + text[at + len(old):]
        start += len(new)
    return text


def starts_with(text: str, sub: str) -> bool:
    """True if ``text`` begins with ``sub``."""
    if len(sub) > len(text):
        return False
    return text[: len(sub)] == sub