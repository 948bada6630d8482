"""Multi-precision helpers on 64-bit limbs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MASK64 = (1 << 64) - 1
MASK128 = (1 << 128) - 1
LIMB_BITS = 64


def adc(a: int, b: int, carry: int) -> tuple[int, int]:
    """Compute a + b + carry, returning the low word and the carry out."""
    total = a + b + carry
    return total & MASK64, total >> LIMB_BITS


def sbb(a: int, b: int, borrow: int) -> tuple[int, int]:
    """Compute a - (b + borrow), returning the low word and the new borrow.

    The incoming borrow is read from its top bit; the outgoing borrow is
    either zero or a word of all ones.
    """
    ret = (a - (b + (borrow >> 63))) & MASK128
    return ret & MASK64, ret >> LIMB_BITS


def mac(a: int, b: int, c: int, carry: int) -> tuple[int, int]:
    """Compute a + b * c + carry, returning the low word and the carry out."""
    total = a + b * c + carry
    return total & MASK64, total >> LIMB_BITS


def macx(a: int, b: int, c: int) -> tuple[int, int]:
    """Compute a + b * c, returning the low word and the carry out."""
    total = a + b * c
    return total & MASK64, total >> LIMB_BITS


def limbs_to_int(limbs: Iterable[int]) -> int:
    """Join little-endian 64-bit limbs into one integer."""
    value = 0
    for position, limb in enumerate(limbs):
        if not 0 <= limb <= MASK64:
            raise ValueError(f"limb {limb!r} does not fit in 64 bits")
        value |= limb << (LIMB_BITS * position)
    return value


def int_to_limbs(value: int, count: int) -> tuple[int, ...]:
    """Split a non-negative integer into `count` little-endian 64-bit limbs."""
    if value < 0:
        raise ValueError("value must be non-negative")
    if value >> (LIMB_BITS * count):
        raise ValueError(f"value does not fit in {count} limbs")
    return tuple((value >> (LIMB_BITS * i)) & MASK64 for i in range(count))


def mul_512(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
    """Multiply two 4-limb numbers, returning the 8-limb product."""
    if len(a) != 4 or len(b) != 4:
        raise ValueError("mul_512 takes two 4-limb operands")
    return int_to_limbs(limbs_to_int(a) * limbs_to_int(b), 8)