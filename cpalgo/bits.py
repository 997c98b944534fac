"""Bit tricks on 64-bit unsigned words."""

_MASK64 = (1 << 64) - 1


def popcount(x: int) -> int:
    """Number of set bits in the low 64 bits of ``x``."""
    return (x & _MASK64).bit_count()


def msb_index(x: int) -> int:
    """Index of the highest set bit of the 64-bit word ``x``."""
    x &= _MASK64
    if x == 0:
        raise ValueError("msb_index is undefined for zero")
    return x.bit_length() - 1


def lsb_index(x: int) -> int:
    """Index of the lowest set bit of the 64-bit word ``x``."""
    x &= _MASK64
    if x == 0:
        raise ValueError("lsb_index is undefined for zero")
    return (x & -x).bit_length() - 1