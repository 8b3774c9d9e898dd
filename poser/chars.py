"""ASCII character classification and case conversion."""

_TRIM_CHARS = frozenset(" \t\n\r\v\f")
_CASE_BIT = 0x20


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _is_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def _is_lower(c: str) -> bool:
    return "a" <= c <= "z"


def invert_case_char(c: str) -> str:
    """Swap the case of an ASCII letter; any other character is returned as is."""
    _check_char(c)
    if _is_upper(c) or _is_lower(c):
        return chr(ord(c) ^ _CASE_BIT)
    return c


def to_lower_char(c: str) -> str:
    """Lower-case an ASCII upper-case letter; leave anything else alone."""
    _check_char(c)
    return invert_case_char(c) if _is_upper(c) else c


def to_upper_char(c: str) -> str:
    """Upper-case an ASCII lower-case letter; leave anything else alone."""
    _check_char(c)
    return invert_case_char(c) if _is_lower(c) else c


def is_trim_char(c: str) -> bool:
    """True for the whitespace characters removed by trimming."""
    _check_char(c)
    return c in _TRIM_CHARS


def invert_case(text: str) -> str:
    """Swap the case of every ASCII letter in ``text``."""
    return "".join(invert_case_char(c) for c in text)


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters of ``text``."""
    return "".join(to_lower_char(c) for c in text)


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters of ``text``."""
    return "".join(to_upper_char(c) for c in text)