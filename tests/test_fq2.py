import random

import pytest

from bnpair.fq import MODULUS, Fq
from bnpair.fq2 import Fq2

Q_LIMBS = [0x3C208C16D87CFD47, 0x97816A916871CA8D, 0xB85045B68181585D, 0x30644E72E131A029]


@pytest.fixture
def rng():
    return random.Random(0x5962BE5D763D318D17DB37325406BCE5)


def test_ser(rng):
    a0 = Fq2.random(rng)
    a_bytes = a0.to_bytes()
    assert len(a_bytes) == 64
    assert Fq2.from_bytes(a_bytes) == a0


def test_from_bytes_rejects_non_canonical():
    bad = MODULUS.to_bytes(32, "little") + bytes(32)
    with pytest.raises(ValueError):
        Fq2.from_bytes(bad)
    bad = bytes(32) + MODULUS.to_bytes(32, "little")
    with pytest.raises(ValueError):
        Fq2.from_bytes(bad)


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        Fq2.from_bytes(bytes(63))


def test_fq2_ordering():
    a = Fq2(Fq.zero(), Fq.zero())
    b = Fq2(a.c0, a.c1)
    assert a == b
    b = Fq2(b.c0 + Fq.one(), b.c1)
    assert a < b
    a = Fq2(a.c0 + Fq.one(), a.c1)
    assert a == b
    b = Fq2(b.c0, b.c1 + Fq.one())
    assert a < b
    a = Fq2(a.c0 + Fq.one(), a.c1)
    assert a < b
    a = Fq2(a.c0, a.c1 + Fq.one())
    assert a > b
    b = Fq2(b.c0 + Fq.one(), b.c1)
    assert a == b


def test_fq2_basics():
    assert Fq2(Fq.zero(), Fq.zero()) == Fq2.ZERO
    assert Fq2(Fq.one(), Fq.zero()) == Fq2.ONE
    assert Fq2.ZERO.is_zero() is True
    assert Fq2.ONE.is_zero() is False
    assert Fq2(Fq.zero(), Fq.one()).is_zero() is False


def test_fq2_squaring():
    a = Fq2(Fq.one(), Fq.one())
    assert a.square() == Fq2(Fq.zero(), Fq.one() + Fq.one())
    a = Fq2(Fq.zero(), Fq.one())
    assert a.square() == Fq2(-Fq.one(), Fq.zero())


def test_square_matches_mul(rng):
    for _ in range(100):
        a = Fq2.random(rng)
        assert a.square() == a * a


def test_fq2_mul_nonresidue(rng):
    nine = Fq.one().double().double().double() + Fq.one()
    nqr = Fq2(nine, Fq.one())
    for _ in range(200):
        a = Fq2.random(rng)
        assert a.mul_by_nonresidue() == a * nqr
        assert a.mul_by_xi() == a * nqr


def test_sqrt_of_non_residues_fails(rng):
    seen = 0
    for _ in range(100):
        a = Fq2.random(rng)
        if a.legendre() == -Fq.ONE:
            seen += 1
            with pytest.raises(ValueError):
                a.sqrt()
    assert seen > 0


def test_sqrt_of_squares(rng):
    for _ in range(100):
        a = Fq2.random(rng)
        b = a.square()
        assert b.legendre() == Fq.ONE
        root = b.sqrt()
        assert a == root or a == -root


def test_sqrt_sequential():
    c = Fq2.ONE
    for _ in range(100):
        b = c.square()
        assert b.legendre() == Fq.ONE
        b = b.sqrt()
        if b != c:
            b = -b
        assert b == c
        c += Fq2.ONE


def test_sqrt_zero():
    assert Fq2.zero().sqrt() == Fq2.zero()


def test_frobenius(rng):
    for _ in range(3):
        for i in range(14):
            a = Fq2.random(rng)
            b = a.frobenius_map(i)
            for _ in range(i):
                a = a.pow(Q_LIMBS)
            assert a == b


def test_frobenius_is_conjugation(rng):
    a = Fq2.random(rng)
    assert a.frobenius_map(1) == a.conjugate()
    assert a.frobenius_map(2) == a


def test_zeta():
    zeta = Fq2(Fq.ZETA.square(), Fq.zero())
    assert zeta == Fq2.ZETA
    assert Fq2.ZETA.pow(3) == Fq2.ONE
    assert Fq2.ZETA != Fq2.ONE


def test_invert(rng):
    for _ in range(100):
        a = Fq2.random(rng)
        assert a * a.invert() == Fq2.ONE


def test_invert_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Fq2.zero().invert()


def test_field_axioms(rng):
    for _ in range(50):
        a, b, c = Fq2.random(rng), Fq2.random(rng), Fq2.random(rng)
        assert (a + b) * c == a * c + b * c
        assert a * b == b * a
        assert (a * b) * c == a * (b * c)
        assert a - a == Fq2.ZERO
        assert a + (-a) == Fq2.ZERO
        assert a.double() == a + a
        assert (a / b) * b == a


def test_pow_small_exponents(rng):
    a = Fq2.random(rng)
    assert a.pow(0) == Fq2.ONE
    assert a.pow(1) == a
    assert a.pow(5) == a * a * a * a * a
    assert a ** 2 == a.square()
    with pytest.raises(ValueError):
        a.pow(-1)


def test_norm_is_multiplicative(rng):
    a, b = Fq2.random(rng), Fq2.random(rng)
    assert (a * b).norm() == a.norm() * b.norm()
    assert a.norm() == (a * a.conjugate()).c0


def test_from_int_and_is_odd():
    assert Fq2.from_int(5) == Fq2(Fq(5), Fq(0))
    assert Fq2.from_int(True) == Fq2.ONE
    assert Fq2.from_int(False) == Fq2.ZERO
    assert Fq2.from_int(5).is_odd() is True
    assert Fq2(Fq(4), Fq(1)).is_odd() is False


def test_from_uniform_bytes():
    data = bytes(range(64))
    value = Fq2.from_uniform_bytes(data)
    assert value.c1 == Fq.ZERO
    assert value.c0 == Fq.from_uniform_bytes(data)


def test_two_inv():
    assert Fq2.TWO_INV.double() == Fq2.ONE