"""The BN254 groups: G1 over F_q and G2 over F_q2, projective and affine."""

from __future__ import annotations

import operator
import secrets
from typing import ClassVar

from bnpair.fq import Fq
from bnpair.fq2 import Fq2

# Order of the prime-order subgroups (the scalar field modulus r).
SCALAR_MODULUS = 0x30644E72E131A029B85045B68181585D2833E84879B9709143E1F593F0000001
# Cofactor of G2 on the twist E'(F_q2), 2q - r.
G2_COFACTOR = 0x30644E72E131A029B85045B68181585E06CEECDA572A2489345F2299C0F9FA8D


def _scalar(value) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


class _ProjectivePoint:
    """A point (X : Y : Z) on y^2 = x^3 + b in homogeneous coordinates."""

    __slots__ = ("x", "y", "z")

    FIELD: ClassVar[type]
    A: ClassVar[object]
    B: ClassVar[object]
    B3: ClassVar[object]
    GENERATOR_X: ClassVar[object]
    GENERATOR_Y: ClassVar[object]
    AFFINE: ClassVar[type]
    CURVE_ID: ClassVar[str]

    def __init__(self, x, y, z) -> None:
        field = self.FIELD
        self.x = x if isinstance(x, field) else field(x)
        self.y = y if isinstance(y, field) else field(y)
        self.z = z if isinstance(z, field) else field(z)

    @classmethod
    def _identity_point(cls):
        return cls(cls.FIELD.zero(), cls.FIELD.one(), cls.FIELD.zero())

    @classmethod
    def _generator_point(cls):
        return cls(cls.GENERATOR_X, cls.GENERATOR_Y, cls.FIELD.one())

    @classmethod
    def _random_point(cls, rng=None):
        while True:
            x = cls.FIELD.random(rng)
            try:
                y = (x.square() * x + cls.B).sqrt()
            except ValueError:
                continue
            flip = secrets.randbits(1) if rng is None else rng.getrandbits(1)
            if flip:
                y = -y
            point = cls(x, y, cls.FIELD.one()).clear_cofactor()
            if not point.is_identity():
                return point

    def _point_is_identity(self) -> bool:
        return self.z.is_zero()

    def _point_is_on_curve(self) -> bool:
        if self.is_identity():
            return True
        lhs = self.y.square() * self.z
        rhs = self.x.square() * self.x + self.z.square() * self.z * self.B
        return lhs == rhs

    def _point_double(self):
        # Complete doubling for a = 0.
        x, y, z = self.x, self.y, self.z
        b3 = self.B3
        t0 = y.square()
        z3 = t0.double().double().double()
        t1 = y * z
        t2 = b3 * z.square()
        x3 = t2 * z3
        y3 = t0 + t2
        z3 = t1 * z3
        t2 = t2.double() + t2
        t0 = t0 - t2
        y3 = t0 * y3 + x3
        x3 = (t0 * (x * y)).double()
        return type(self)(x3, y3, z3)

    def _add(self, other):
        # Complete addition for a = 0.
        x1, y1, z1 = self.x, self.y, self.z
        x2, y2, z2 = other.x, other.y, other.z
        b3 = self.B3
        t0 = x1 * x2
        t1 = y1 * y2
        t2 = z1 * z2
        t3 = (x1 + y1) * (x2 + y2) - (t0 + t1)
        t4 = (y1 + z1) * (y2 + z2) - (t1 + t2)
        y3 = (x1 + z1) * (x2 + z2) - (t0 + t2)
        t0 = t0.double() + t0
        t2 = b3 * t2
        z3 = t1 + t2
        t1 = t1 - t2
        y3 = b3 * y3
        x3 = t3 * t1 - t4 * y3
        y3 = t1 * z3 + y3 * t0
        z3 = z3 * t4 + t0 * t3
        return type(self)(x3, y3, z3)

    def _mul(self, k: int):
        base = self
        if k < 0:
            base, k = -self, -k
        acc = type(self).identity()
        for bit in bin(k)[2:]:
            acc = acc.double()
            if bit == "1":
                acc = acc._add(base)
        return acc

    def _point_to_affine(self):
        if self.is_identity():
            return self.AFFINE.identity()
        zinv = self.z.invert()
        return self.AFFINE(self.x * zinv, self.y * zinv)

    def _coerce(self, other):
        if isinstance(other, type(self)):
            return other
        if isinstance(other, self.AFFINE):
            return other.to_curve()
        return None

    def __add__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._add(rhs)

    def __radd__(self, other):
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._add(self)

    def __sub__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._add(-rhs)

    def __rsub__(self, other):
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._add(-self)

    def __neg__(self):
        return type(self)(self.x, -self.y, self.z)

    def __mul__(self, scalar):
        k = _scalar(scalar)
        if k is None:
            return NotImplemented
        return self._mul(k)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        self_inf, other_inf = self.is_identity(), other.is_identity()
        if self_inf or other_inf:
            return self_inf and other_inf
        return self.x * other.z == other.x * self.z and self.y * other.z == other.y * self.z

    def __hash__(self) -> int:
        affine = self.to_affine()
        return hash((type(self), affine.x, affine.y))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x!r}, y={self.y!r}, z={self.z!r})"


class _AffinePoint:
    """A point (x, y) on y^2 = x^3 + b; (0, 0) stands for the identity."""

    __slots__ = ("x", "y")

    CURVE: ClassVar[type]

    def __init__(self, x, y) -> None:
        field = self.CURVE.FIELD
        self.x = x if isinstance(x, field) else field(x)
        self.y = y if isinstance(y, field) else field(y)

    @classmethod
    def _identity_point(cls):
        field = cls.CURVE.FIELD
        return cls(field.zero(), field.zero())

    @classmethod
    def _generator_point(cls):
        return cls(cls.CURVE.GENERATOR_X, cls.CURVE.GENERATOR_Y)

    def _point_is_identity(self) -> bool:
        return self.x.is_zero() and self.y.is_zero()

    def _point_is_on_curve(self) -> bool:
        if self.is_identity():
            return True
        return self.y.square() == self.x.square() * self.x + self.CURVE.B

    def _point_to_curve(self):
        if self.is_identity():
            return self.CURVE.identity()
        return self.CURVE(self.x, self.y, self.CURVE.FIELD.one())

    def __neg__(self):
        if self.is_identity():
            return type(self).identity()
        return type(self)(self.x, -self.y)

    def __add__(self, other):
        if isinstance(other, (type(self), self.CURVE)):
            return self.to_curve() + other
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, (type(self), self.CURVE)):
            return self.to_curve() - other
        return NotImplemented

    def __mul__(self, scalar):
        k = _scalar(scalar)
        if k is None:
            return NotImplemented
        return self.to_curve()._mul(k)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((type(self), self.x, self.y))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x!r}, y={self.y!r})"


class G1(_ProjectivePoint):
    """A point of BN254 G1: y^2 = x^3 + 3 over F_q."""

    __slots__ = ()

    FIELD = Fq
    A = Fq.from_raw([0, 0, 0, 0])
    B = Fq.from_raw([3, 0, 0, 0])
    B3 = B + B + B
    GENERATOR_X = Fq.one()
    GENERATOR_Y = Fq.from_raw([2, 0, 0, 0])
    CURVE_ID = "bn256_g1"

    @classmethod
    def identity(cls) -> G1:
        """The point at infinity."""
        return cls._identity_point()

    @classmethod
    def generator(cls) -> G1:
        """The fixed generator (1, 2)."""
        return cls._generator_point()

    @classmethod
    def random(cls, rng=None) -> G1:
        """Draw a random non-identity point; `rng` needs `randbytes` and `getrandbits`."""
        return cls._random_point(rng)

    def is_identity(self) -> bool:
        return self._point_is_identity()

    def is_on_curve(self) -> bool:
        """Check Y^2 Z = X^3 + b Z^3; the identity counts as on the curve."""
        return self._point_is_on_curve()

    def double(self) -> G1:
        return self._point_double()

    def to_affine(self) -> G1Affine:
        return self._point_to_affine()

    def clear_cofactor(self) -> G1:
        return self

    def is_torsion_free(self) -> bool:
        return True


class G2(_ProjectivePoint):
    """A point of BN254 G2 on the sextic twist over F_q2."""

    __slots__ = ()

    FIELD = Fq2
    A = Fq2(Fq.from_raw([0, 0, 0, 0]), Fq.from_raw([0, 0, 0, 0]))
    B = Fq2(
        Fq.from_raw(
            [0x3267E6DC24A138E5, 0xB5B4C5E559DBEFA3, 0x81BE18991BE06AC3, 0x2B149D40CEB8AAAE]
        ),
        Fq.from_raw(
            [0xE4A2BD0685C315D2, 0xA74FA084E52D1852, 0xCD2CAFADEED8FDF4, 0x009713B03AF0FED4]
        ),
    )
    B3 = B + B + B
    GENERATOR_X = Fq2(
        Fq.from_raw(
            [0x46DEBD5CD992F6ED, 0x674322D4F75EDADD, 0x426A00665E5C4479, 0x1800DEEF121F1E76]
        ),
        Fq.from_raw(
            [0x97E485B7AEF312C2, 0xF1AA493335A9E712, 0x7260BFB731FB5D25, 0x198E9393920D483A]
        ),
    )
    GENERATOR_Y = Fq2(
        Fq.from_raw(
            [0x4CE6CC0166FA7DAA, 0xE3D1E7690C43D37B, 0x4AAB71808DCB408F, 0x12C85EA5DB8C6DEB]
        ),
        Fq.from_raw(
            [0x55ACDADCD122975B, 0xBC4B313370B38EF3, 0xEC9E99AD690C3395, 0x090689D0585FF075]
        ),
    )
    CURVE_ID = "bn256_g2"

    @classmethod
    def identity(cls) -> G2:
        """The point at infinity."""
        return cls._identity_point()

    @classmethod
    def generator(cls) -> G2:
        """The fixed generator of the prime-order subgroup."""
        return cls._generator_point()

    @classmethod
    def random(cls, rng=None) -> G2:
        """Draw a random non-identity subgroup point; `rng` needs `randbytes` and `getrandbits`."""
        return cls._random_point(rng)

    def is_identity(self) -> bool:
        return self._point_is_identity()

    def is_on_curve(self) -> bool:
        """Check Y^2 Z = X^3 + b Z^3; the identity counts as on the curve."""
        return self._point_is_on_curve()

    def double(self) -> G2:
        return self._point_double()

    def to_affine(self) -> G2Affine:
        return self._point_to_affine()

    def clear_cofactor(self) -> G2:
        """Multiply by the cofactor 2q - r to land in the prime-order subgroup."""
        return self._mul(G2_COFACTOR)

    def is_torsion_free(self) -> bool:
        """True when multiplying by the group order r gives the identity."""
        return self._mul(SCALAR_MODULUS).is_identity()


class G1Affine(_AffinePoint):
    """A G1 point in affine coordinates."""

    __slots__ = ()
    CURVE = G1

    @classmethod
    def identity(cls) -> G1Affine:
        return cls._identity_point()

    @classmethod
    def generator(cls) -> G1Affine:
        return cls._generator_point()

    def is_identity(self) -> bool:
        return self._point_is_identity()

    def is_on_curve(self) -> bool:
        return self._point_is_on_curve()

    def to_curve(self) -> G1:
        return self._point_to_curve()


class G2Affine(_AffinePoint):
    """A G2 point in affine coordinates."""

    __slots__ = ()
    CURVE = G2

    @classmethod
    def identity(cls) -> G2Affine:
        return cls._identity_point()

    @classmethod
    def generator(cls) -> G2Affine:
        return cls._generator_point()

    def is_identity(self) -> bool:
        return self._point_is_identity()

    def is_on_curve(self) -> bool:
        return self._point_is_on_curve()

    def to_curve(self) -> G2:
        return self._point_to_curve()


G1.AFFINE = G1Affine
G2.AFFINE = G2Affine

__all__ = ["G1", "G2", "G1Affine", "G2Affine", "SCALAR_MODULUS", "G2_COFACTOR"]