"""The optimal ate pairing on BN254 and its target group Gt."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from bnpair.curve import G1Affine, G2Affine
from bnpair.fq import Fq
from bnpair.fq2 import Fq2
from bnpair.fq6 import FROBENIUS_COEFF_FQ6_C1
from bnpair.fq12 import Fq12

BN_X = 4965661367192848881

# 6u + 2 in non-adjacent form, least significant digit first.
SIX_U_PLUS_2_NAF: tuple[int, ...] = (
    0, 0, 0, 1, 0, 1, 0, -1, 0, 0, 1, -1, 0, 0, 1, 0, 0, 1, 1, 0, -1, 0, 0, 1, 0, -1, 0, 0, 0, 0,
    1, 1, 1, 0, 0, -1, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 1, 1, 0, 0, -1, 0, 0, 0, 1, 1, 0, -1, 0,
    0, 1, 0, 1, 1,
)

XI_TO_Q_MINUS_1_OVER_2 = Fq2(
    Fq.from_montgomery(
        [0xE4BBDD0C2936B629, 0xBB30F162E133BACB, 0x31A9D1B6F9645366, 0x253570BEA500F8DD]
    ),
    Fq.from_montgomery(
        [0xA1D77CE45FFE77C7, 0x07AFFD117826D1DB, 0x6D16BD27BB7EDC6B, 0x2C87200285DEFECC]
    ),
)

LineCoeffs = tuple[Fq2, Fq2, Fq2]


def _scalar(value) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


@dataclass(frozen=True)
class Gt:
    """An element of the pairing target group, written additively."""

    value: Fq12 = field(default_factory=Fq12.one)

    @classmethod
    def identity(cls) -> Gt:
        """The group identity, which is one in F_q12."""
        return cls(Fq12.one())

    def double(self) -> Gt:
        return Gt(self.value.square())

    def is_identity(self) -> bool:
        return self.value == Fq12.one()

    def __add__(self, other) -> Gt:
        if not isinstance(other, Gt):
            return NotImplemented
        return Gt(self.value * other.value)

    def __radd__(self, other) -> Gt:
        # Lets the built-in sum() start from 0.
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __neg__(self) -> Gt:
        # Elements are unitary, so the inverse is the conjugate.
        return Gt(self.value.conjugate())

    def __sub__(self, other) -> Gt:
        if not isinstance(other, Gt):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar) -> Gt:
        k = _scalar(scalar)
        if k is None:
            return NotImplemented
        base = self
        if k < 0:
            base, k = -self, -k
        acc = Gt.identity()
        for bit in bin(k)[2:]:
            acc = acc.double()
            if bit == "1":
                acc = acc + base
        return acc

    __rmul__ = __mul__

    def __str__(self) -> str:
        return repr(self)

    def final_exponentiation(self) -> Gt:
        """Raise a Miller loop result to (q^12 - 1) / r."""

        def exp_by_x(f: Fq12) -> Fq12:
            res = Fq12.one()
            for i in range(63, -1, -1):
                res = res.cyclotomic_square()
                if (BN_X >> i) & 1:
                    res = res * f
            return res

        f1 = self.value.conjugate()
        f2 = self.value.invert()

        r = f1 * f2
        f2 = r
        r = r.frobenius_map(2) * f2

        fp = r.frobenius_map(1)
        fp2 = r.frobenius_map(2)
        fp3 = fp2.frobenius_map(1)

        fu = exp_by_x(r)
        fu2 = exp_by_x(fu)
        fu3 = exp_by_x(fu2)

        y3 = fu.frobenius_map(1)
        fu2p = fu2.frobenius_map(1)
        fu3p = fu3.frobenius_map(1)
        y2 = fu2.frobenius_map(2)

        y0 = fp * fp2 * fp3
        y1 = r.conjugate()
        y5 = fu2.conjugate()
        y3 = y3.conjugate()
        y4 = (fu * fu2p).conjugate()
        y6 = (fu3 * fu3p).conjugate()

        y6 = y6.cyclotomic_square() * y4 * y5

        t1 = y3 * y5 * y6
        y6 = y6 * y2

        t1 = t1.cyclotomic_square() * y6
        t1 = t1.cyclotomic_square()

        t0 = t1 * y1
        t1 = t1 * y0

        t0 = t0.cyclotomic_square() * t1
        return Gt(t0)


def _doubling_step(x: Fq2, y: Fq2, z: Fq2) -> tuple[tuple[Fq2, Fq2, Fq2], LineCoeffs]:
    tmp0 = x.square()
    tmp1 = y.square()
    tmp2 = tmp1.square()
    tmp3 = ((tmp1 + x).square() - tmp0 - tmp2).double()
    tmp4 = tmp0.double() + tmp0
    tmp6 = x + tmp4
    tmp5 = tmp4.square()
    zsquared = z.square()

    new_x = tmp5 - tmp3 - tmp3
    new_z = (z + y).square() - tmp1 - zsquared
    new_y = (tmp3 - new_x) * tmp4 - tmp2.double().double().double()

    tmp3 = -((tmp4 * zsquared).double())
    tmp6 = tmp6.square() - tmp0 - tmp5 - tmp1.double().double()
    tmp0 = (new_z * zsquared).double()
    return (new_x, new_y, new_z), (tmp0, tmp3, tmp6)


def _addition_step(
    x: Fq2, y: Fq2, z: Fq2, qx: Fq2, qy: Fq2
) -> tuple[tuple[Fq2, Fq2, Fq2], LineCoeffs]:
    zsquared = z.square()
    ysquared = qy.square()
    t0 = zsquared * qx
    t1 = ((qy + z).square() - ysquared - zsquared) * zsquared
    t2 = t0 - x
    t3 = t2.square()
    t4 = t3.double().double()
    t5 = t4 * t2
    t6 = t1 - y - y
    t9 = t6 * qx
    t7 = t4 * x

    new_x = t6.square() - t5 - t7 - t7
    new_z = (z + t2).square() - zsquared - t3
    t10 = qy + new_z
    t8 = (t7 - new_x) * t6
    t0 = (y * t5).double()
    new_y = t8 - t0

    t10 = t10.square() - ysquared - new_z.square()
    t9 = t9.double() - t10
    t10 = new_z.double()
    t1 = (-t6).double()
    return (new_x, new_y, new_z), (t10, t1, t9)


@dataclass(frozen=True)
class G2Prepared:
    """Line coefficients of a G2 point, precomputed for the Miller loop."""

    coeffs: tuple[LineCoeffs, ...] = ()
    infinity: bool = True

    def is_zero(self) -> bool:
        return self.infinity

    @classmethod
    def from_affine(cls, q: G2Affine) -> G2Prepared:
        if q.is_identity():
            return cls(coeffs=(), infinity=True)

        coeffs: list[LineCoeffs] = []
        state = (q.x, q.y, Fq2.one())
        negq = -q

        for i in range(len(SIX_U_PLUS_2_NAF) - 1, 0, -1):
            state, line = _doubling_step(*state)
            coeffs.append(line)
            digit = SIX_U_PLUS_2_NAF[i - 1]
            if digit == 1:
                state, line = _addition_step(*state, q.x, q.y)
                coeffs.append(line)
            elif digit == -1:
                state, line = _addition_step(*state, negq.x, negq.y)
                coeffs.append(line)

        q1x = q.x.conjugate() * FROBENIUS_COEFF_FQ6_C1[1]
        q1y = q.y.conjugate() * XI_TO_Q_MINUS_1_OVER_2
        state, line = _addition_step(*state, q1x, q1y)
        coeffs.append(line)

        minusq2x = q.x * FROBENIUS_COEFF_FQ6_C1[2]
        state, line = _addition_step(*state, minusq2x, q.y)
        coeffs.append(line)

        return cls(coeffs=tuple(coeffs), infinity=False)


def _ell(f: Fq12, coeffs: LineCoeffs, p: G1Affine) -> Fq12:
    c0 = coeffs[0] * p.y
    c1 = coeffs[1] * p.x
    return f.mul_by_034(c0, c1, coeffs[2])


def multi_miller_loop(terms: Iterable[tuple[G1Affine, G2Prepared]]) -> Gt:
    """Run one shared Miller loop over several (G1, prepared G2) pairs."""
    pairs: list[tuple[G1Affine, Iterator[LineCoeffs]]] = [
        (p, iter(q.coeffs)) for p, q in terms if not p.is_identity() and not q.is_zero()
    ]

    def step(f: Fq12) -> Fq12:
        for p, coeffs in pairs:
            try:
                line = next(coeffs)
            except StopIteration:
                raise ValueError("prepared G2 point has too few line coefficients") from None
            f = _ell(f, line, p)
        return f

    f = Fq12.one()
    last = len(SIX_U_PLUS_2_NAF) - 1
    for i in range(last, 0, -1):
        if i != last:
            f = f.square()
        f = step(f)
        if SIX_U_PLUS_2_NAF[i - 1] in (1, -1):
            f = step(f)

    f = step(f)
    f = step(f)

    for _, coeffs in pairs:
        if next(coeffs, None) is not None:
            raise ValueError("prepared G2 point has too many line coefficients")

    return Gt(f)


def pairing(g1: G1Affine, g2: G2Affine) -> Gt:
    """Compute the optimal ate pairing e(g1, g2)."""
    prepared = G2Prepared.from_affine(g2)
    return multi_miller_loop([(g1, prepared)]).final_exponentiation()


def _pairs(points: Sequence[tuple[G1Affine, G2Affine]]) -> list[tuple[G1Affine, G2Prepared]]:
    return [(p, G2Prepared.from_affine(q)) for p, q in points]


__all__ = [
    "BN_X",
    "SIX_U_PLUS_2_NAF",
    "XI_TO_Q_MINUS_1_OVER_2",
    "Gt",
    "G2Prepared",
    "multi_miller_loop",
    "pairing",
]