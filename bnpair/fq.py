"""The base field of the BN254 curve."""

from __future__ import annotations

import functools
import os
from collections.abc import Iterable
from typing import ClassVar, Union

from bnpair.arithmetic import int_to_limbs, limbs_to_int

MODULUS = 0x30644E72E131A029B85045B68181585D97816A916871CA8D3C208C16D87CFD47
MODULUS_STR = "0x30644e72e131a029b85045b68181585d97816a916871ca8d3c208c16d87cfd47"

# Montgomery constants for R = 2^256.
INV = 0x87D20782E4866389
R = limbs_to_int([0xD35D438DC58F0D9D, 0x0A78EB28F5C70B3D, 0x666EA36F7879462C, 0x0E0A77C19A07DF2F])
R2 = limbs_to_int([0xF32CFC5B538AFA89, 0xB5E71911D44501FB, 0x47AB1EFF0A417FF6, 0x06D89F71CAB8351F])
R3 = limbs_to_int([0xB1CD6DAFDA1530DF, 0x62F210E6A7283DB6, 0xEF7F0B0C0ADA0AFB, 0x20FD6E902D592544])
_R_INV = pow(1 << 256, MODULUS - 2, MODULUS)

_SQRT_EXP = limbs_to_int([0x4F082305B61F3F52, 0x65E05AA45A1C72A3, 0x6E14116DA0605617, 0x0C19139CB84C680A])
_LEGENDRE_EXP = (MODULUS - 1) // 2

Exponent = Union[int, Iterable[int]]


def _exponent(exponent: Exponent) -> int:
    value = exponent if isinstance(exponent, int) else limbs_to_int(exponent)
    if value < 0:
        raise ValueError("exponent must be non-negative")
    return value


@functools.total_ordering
class Fq:
    """An element of F_q, held as its canonical integer value."""

    __slots__ = ("_value",)

    SIZE: ClassVar[int] = 32
    NUM_BITS: ClassVar[int] = 254
    CAPACITY: ClassVar[int] = 253
    S: ClassVar[int] = 0
    MODULUS: ClassVar[int] = MODULUS

    ZERO: ClassVar[Fq]
    ONE: ClassVar[Fq]
    NEGATIVE_ONE: ClassVar[Fq]
    MULTIPLICATIVE_GENERATOR: ClassVar[Fq]
    TWO_INV: ClassVar[Fq]
    ROOT_OF_UNITY: ClassVar[Fq]
    ROOT_OF_UNITY_INV: ClassVar[Fq]
    DELTA: ClassVar[Fq]
    ZETA: ClassVar[Fq]

    def __init__(self, value: int = 0) -> None:
        self._value = int(value) % MODULUS

    # construction

    @classmethod
    def zero(cls) -> Fq:
        return cls(0)

    @classmethod
    def one(cls) -> Fq:
        return cls(1)

    @classmethod
    def from_raw(cls, limbs: Iterable[int]) -> Fq:
        """Build an element from canonical little-endian 64-bit limbs."""
        return cls(limbs_to_int(limbs))

    @classmethod
    def from_montgomery(cls, limbs: Iterable[int]) -> Fq:
        """Build an element from limbs holding its Montgomery form aR mod q."""
        return cls(limbs_to_int(limbs) * _R_INV)

    @classmethod
    def from_u512(cls, limbs: Iterable[int]) -> Fq:
        """Reduce a 512-bit little-endian limb number modulo q."""
        limbs = tuple(limbs)
        if len(limbs) != 8:
            raise ValueError("from_u512 takes 8 limbs")
        return cls(limbs_to_int(limbs))

    @classmethod
    def from_uniform_bytes(cls, data: bytes) -> Fq:
        """Reduce 64 little-endian bytes modulo q."""
        if len(data) != 64:
            raise ValueError("from_uniform_bytes takes 64 bytes")
        return cls(int.from_bytes(data, "little"))

    @classmethod
    def from_bytes(cls, data: bytes) -> Fq:
        """Parse 32 little-endian bytes, rejecting non-canonical values."""
        if len(data) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} bytes, got {len(data)}")
        value = int.from_bytes(data, "little")
        if value >= MODULUS:
            raise ValueError("encoding is not a canonical field element")
        return cls(value)

    @classmethod
    def from_repr(cls, data: bytes) -> Fq:
        return cls.from_bytes(data)

    @classmethod
    def random(cls, rng=None) -> Fq:
        """Draw a uniform element; `rng` needs a `randbytes` method."""
        data = os.urandom(64) if rng is None else rng.randbytes(64)
        return cls.from_uniform_bytes(data)

    # encoding

    def to_bytes(self) -> bytes:
        return self._value.to_bytes(self.SIZE, "little")

    def to_repr(self) -> bytes:
        return self.to_bytes()

    @property
    def value(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"Fq(0x{self._value:064x})"

    # predicates

    def is_zero(self) -> bool:
        return self._value == 0

    def is_odd(self) -> bool:
        return bool(self._value & 1)

    def __bool__(self) -> bool:
        return self._value != 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Fq):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other: Fq) -> bool:
        if isinstance(other, Fq):
            return self._value < other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Fq, self._value))

    # arithmetic

    @staticmethod
    def _coerce(other):
        if isinstance(other, Fq):
            return other._value
        if isinstance(other, int):
            return other
        return None

    def __add__(self, other) -> Fq:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Fq(self._value + value)

    __radd__ = __add__

    def __sub__(self, other) -> Fq:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Fq(self._value - value)

    def __rsub__(self, other) -> Fq:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Fq(value - self._value)

    def __mul__(self, other) -> Fq:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Fq(self._value * value)

    __rmul__ = __mul__

    def __truediv__(self, other) -> Fq:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self * Fq(value).invert()

    def __neg__(self) -> Fq:
        return Fq(-self._value)

    def __pow__(self, exponent: int) -> Fq:
        return self.pow(exponent)

    def double(self) -> Fq:
        return Fq(self._value << 1)

    def square(self) -> Fq:
        return Fq(self._value * self._value)

    def pow(self, exponent: Exponent) -> Fq:
        """Raise to a non-negative integer or little-endian limb exponent."""
        return Fq(pow(self._value, _exponent(exponent), MODULUS))

    def invert(self) -> Fq:
        if self._value == 0:
            raise ZeroDivisionError("zero has no inverse in Fq")
        return Fq(pow(self._value, MODULUS - 2, MODULUS))

    def sqrt(self) -> Fq:
        """Return a square root, raising ValueError for a non-residue."""
        root = self.pow(_SQRT_EXP)
        if root.square() != self:
            raise ValueError("element is not a quadratic residue")
        return root

    def legendre(self) -> Fq:
        """Return self^((q-1)/2): one, minus one or zero."""
        return self.pow(_LEGENDRE_EXP)


Fq.ZERO = Fq(0)
Fq.ONE = Fq(1)
Fq.NEGATIVE_ONE = Fq.from_montgomery(
    [0x68C3488912EDEFAA, 0x8D087F6872AABF4F, 0x51E1A24709081231, 0x2259D6B14729C0FA]
)
Fq.MULTIPLICATIVE_GENERATOR = Fq.from_raw([0x03, 0x0, 0x0, 0x0])
Fq.TWO_INV = Fq.from_raw(
    [0x9E10460B6C3E7EA4, 0xCBC0B548B438E546, 0xDC2822DB40C0AC2E, 0x183227397098D014]
)
Fq.ROOT_OF_UNITY = Fq.from_raw(
    [0x3C208C16D87CFD46, 0x97816A916871CA8D, 0xB85045B68181585D, 0x30644E72E131A029]
)
Fq.ROOT_OF_UNITY_INV = Fq.from_raw(
    [0x3C208C16D87CFD46, 0x97816A916871CA8D, 0xB85045B68181585D, 0x30644E72E131A029]
)
Fq.DELTA = Fq.from_raw([0x9, 0, 0, 0])
Fq.ZETA = Fq.from_raw(
    [0xE4BD44E5607CFD48, 0xC28F069FBB966E3D, 0x5E6DD9E7E0ACCCB0, 0x30644E72E131A029]
)

NEGATIVE_ONE = Fq.NEGATIVE_ONE
__all__ = ["Fq", "MODULUS", "MODULUS_STR", "NEGATIVE_ONE", "INV", "R", "R2", "R3"]

_ = int_to_limbs  # re-exported helper used by callers building Montgomery limbs