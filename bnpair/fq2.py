"""The quadratic extension F_q2 = F_q[u] / (u^2 + 1) of the BN254 base field."""

from __future__ import annotations

import functools
from collections.abc import Iterable
from typing import ClassVar, Union

from bnpair.arithmetic import limbs_to_int
from bnpair.fq import MODULUS_STR, NEGATIVE_ONE, Fq

Exponent = Union[int, Iterable[int]]

# self^((q - 3) / 4), the first exponent of the square-root algorithm.
_SQRT_EXP_1 = limbs_to_int(
    [0x4F082305B61F3F51, 0x65E05AA45A1C72A3, 0x6E14116DA0605617, 0x0C19139CB84C680A]
)
# (q - 1) / 2, the second exponent of the square-root algorithm.
_SQRT_EXP_2 = limbs_to_int(
    [0x9E10460B6C3E7EA3, 0xCBC0B548B438E546, 0xDC2822DB40C0AC2E, 0x183227397098D014]
)

# (-1)^((q^i - 1) / 2) for i = 0, 1.
FROBENIUS_COEFF_FQ2_C1: tuple[Fq, Fq] = (
    Fq.from_montgomery(
        [0xD35D438DC58F0D9D, 0x0A78EB28F5C70B3D, 0x666EA36F7879462C, 0x0E0A77C19A07DF2F]
    ),
    Fq.from_montgomery(
        [0x68C3488912EDEFAA, 0x8D087F6872AABF4F, 0x51E1A24709081231, 0x2259D6B14729C0FA]
    ),
)


def _exponent(exponent: Exponent) -> int:
    value = exponent if isinstance(exponent, int) else limbs_to_int(exponent)
    if value < 0:
        raise ValueError("exponent must be non-negative")
    return value


def _as_fq(value) -> Fq:
    if isinstance(value, Fq):
        return value
    if isinstance(value, int):
        return Fq(value)
    raise TypeError(f"cannot use {type(value).__name__} as an Fq coefficient")


@functools.total_ordering
class Fq2:
    """An element c0 + c1 * u of F_q2. Ordered by c1 first, then c0."""

    __slots__ = ("c0", "c1")

    SIZE: ClassVar[int] = 64
    MODULUS: ClassVar[str] = MODULUS_STR
    NUM_BITS: ClassVar[int] = 254
    CAPACITY: ClassVar[int] = 253
    S: ClassVar[int] = 0

    ZERO: ClassVar[Fq2]
    ONE: ClassVar[Fq2]
    MULTIPLICATIVE_GENERATOR: ClassVar[Fq2]
    ROOT_OF_UNITY: ClassVar[Fq2]
    ROOT_OF_UNITY_INV: ClassVar[Fq2]
    DELTA: ClassVar[Fq2]
    TWO_INV: ClassVar[Fq2]
    ZETA: ClassVar[Fq2]

    def __init__(self, c0: Fq | int = 0, c1: Fq | int = 0) -> None:
        self.c0 = _as_fq(c0)
        self.c1 = _as_fq(c1)

    # construction

    @classmethod
    def zero(cls) -> Fq2:
        return cls(Fq.ZERO, Fq.ZERO)

    @classmethod
    def one(cls) -> Fq2:
        return cls(Fq.ONE, Fq.ZERO)

    @classmethod
    def from_int(cls, value: int | bool) -> Fq2:
        """Embed an integer (or a bool) into the base-field part."""
        return cls(Fq(int(value)), Fq.ZERO)

    @classmethod
    def from_bytes(cls, data: bytes) -> Fq2:
        """Parse 64 bytes: c0 then c1, each 32 canonical little-endian bytes."""
        if len(data) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} bytes, got {len(data)}")
        return cls(Fq.from_bytes(data[:32]), Fq.from_bytes(data[32:]))

    @classmethod
    def from_uniform_bytes(cls, data: bytes) -> Fq2:
        """Reduce 64 little-endian bytes into c0, leaving c1 zero."""
        return cls(Fq.from_uniform_bytes(data), Fq.ZERO)

    @classmethod
    def random(cls, rng=None) -> Fq2:
        """Draw a uniform element; `rng` needs a `randbytes` method."""
        c0 = Fq.random(rng)
        c1 = Fq.random(rng)
        return cls(c0, c1)

    # encoding

    def to_bytes(self) -> bytes:
        return self.c0.to_bytes() + self.c1.to_bytes()

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __repr__(self) -> str:
        return f"Fq2(c0={self.c0!r}, c1={self.c1!r})"

    # predicates

    def is_zero(self) -> bool:
        return self.c0.is_zero() and self.c1.is_zero()

    def is_odd(self) -> bool:
        return self.c0.is_odd()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Fq2):
            return self.c0 == other.c0 and self.c1 == other.c1
        return NotImplemented

    def __lt__(self, other: Fq2) -> bool:
        if isinstance(other, Fq2):
            return (self.c1, self.c0) < (other.c1, other.c0)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Fq2, self.c0, self.c1))

    # arithmetic

    @staticmethod
    def _lift(other) -> Fq2 | None:
        if isinstance(other, Fq2):
            return other
        if isinstance(other, (Fq, int)):
            return Fq2(other, Fq.ZERO)
        return None

    def __add__(self, other) -> Fq2:
        rhs = self._lift(other)
        if rhs is None:
            return NotImplemented
        return Fq2(self.c0 + rhs.c0, self.c1 + rhs.c1)

    __radd__ = __add__

    def __sub__(self, other) -> Fq2:
        rhs = self._lift(other)
        if rhs is None:
            return NotImplemented
        return Fq2(self.c0 - rhs.c0, self.c1 - rhs.c1)

    def __rsub__(self, other) -> Fq2:
        lhs = self._lift(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other) -> Fq2:
        if isinstance(other, (Fq, int)):
            return Fq2(self.c0 * other, self.c1 * other)
        if not isinstance(other, Fq2):
            return NotImplemented
        # Karatsuba with u^2 = -1.
        t0 = self.c0 * other.c0
        t1 = self.c1 * other.c1
        cross = (self.c0 + self.c1) * (other.c0 + other.c1)
        return Fq2(t0 - t1, cross - t0 - t1)

    __rmul__ = __mul__

    def __truediv__(self, other) -> Fq2:
        rhs = self._lift(other)
        if rhs is None:
            return NotImplemented
        return self * rhs.invert()

    def __neg__(self) -> Fq2:
        return Fq2(-self.c0, -self.c1)

    def __pow__(self, exponent: int) -> Fq2:
        return self.pow(exponent)

    def double(self) -> Fq2:
        return Fq2(self.c0.double(), self.c1.double())

    def square(self) -> Fq2:
        ab = self.c0 * self.c1
        c0 = (self.c0 - self.c1) * (self.c0 + self.c1)
        return Fq2(c0, ab.double())

    def pow(self, exponent: Exponent) -> Fq2:
        """Raise to a non-negative integer or little-endian limb exponent."""
        e = _exponent(exponent)
        result = Fq2.one()
        for bit in bin(e)[2:] if e else "":
            result = result.square()
            if bit == "1":
                result = result * self
        return result

    def conjugate(self) -> Fq2:
        return Fq2(self.c0, -self.c1)

    def frobenius_map(self, power: int) -> Fq2:
        return Fq2(self.c0, self.c1 * FROBENIUS_COEFF_FQ2_C1[power % 2])

    def mul_by_nonresidue(self) -> Fq2:
        """Multiply by the quadratic non-residue 9 + u."""
        nine_c0 = self.c0.double().double().double() + self.c0
        nine_c1 = self.c1.double().double().double() + self.c1
        return Fq2(nine_c0 - self.c1, nine_c1 + self.c0)

    def mul_by_xi(self) -> Fq2:
        """Multiply by xi = u + 9."""
        return self.mul_by_nonresidue()

    def norm(self) -> Fq:
        """The norm c0^2 + c1^2 down to F_q."""
        return self.c0.square() + self.c1.square()

    def legendre(self) -> Fq:
        """Quadratic character through the norm: one, minus one or zero."""
        return self.norm().legendre()

    def invert(self) -> Fq2:
        t = self.norm()
        if t.is_zero():
            raise ZeroDivisionError("zero has no inverse in Fq2")
        t = t.invert()
        return Fq2(self.c0 * t, -(self.c1 * t))

    def sqrt(self) -> Fq2:
        """Return a square root, raising ValueError for a non-residue."""
        if self.is_zero():
            return Fq2.zero()
        a1 = self.pow(_SQRT_EXP_1)
        alpha = a1.square() * self
        a0 = alpha.frobenius_map(1) * alpha
        neg1 = Fq2(NEGATIVE_ONE, Fq.ZERO)
        if a0 == neg1:
            raise ValueError("element is not a quadratic residue")
        x0 = a1 * self
        if alpha == neg1:
            return x0 * Fq2(Fq.ZERO, Fq.ONE)
        return x0 * (alpha + Fq2.one()).pow(_SQRT_EXP_2)


Fq2.ZERO = Fq2.zero()
Fq2.ONE = Fq2.one()
Fq2.MULTIPLICATIVE_GENERATOR = Fq2(Fq.from_raw([0x03, 0x0, 0x0, 0x0]), Fq.ZERO)
Fq2.ROOT_OF_UNITY = Fq2.zero()
Fq2.ROOT_OF_UNITY_INV = Fq2.zero()
Fq2.DELTA = Fq2.zero()
Fq2.TWO_INV = Fq2(
    Fq.from_raw(
        [0x9E10460B6C3E7EA4, 0xCBC0B548B438E546, 0xDC2822DB40C0AC2E, 0x183227397098D014]
    ),
    Fq.ZERO,
)
Fq2.ZETA = Fq2(
    Fq.from_raw([0x5763473177FFFFFE, 0xD4F263F1ACDB5C4F, 0x59E26BCEA0D48BAC, 0x0]),
    Fq.ZERO,
)

__all__ = ["Fq2", "FROBENIUS_COEFF_FQ2_C1"]