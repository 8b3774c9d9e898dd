"""Decimal formatting of fixed-width signed and unsigned 64-bit integers."""

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1


def i64_to_str(value: int) -> str:
    """Format a signed 64-bit integer in decimal."""
    if not I64_MIN <= value <= I64_MAX:
        raise OverflowError(f"{value} does not fit in a signed 64-bit integer")
    return str(int(value))


def u64_to_str(value: int) -> str:
    """Format an unsigned 64-bit integer in decimal."""
    if not 0 <= value <= U64_MAX:
        raise OverflowError(f"{value} does not fit in an unsigned 64-bit integer")
    return str(int(value))