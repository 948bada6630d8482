import random

import pytest

from bnpair.arithmetic import int_to_limbs
from bnpair.fq import INV, MODULUS, MODULUS_STR, NEGATIVE_ONE, R, R2, R3, Fq


@pytest.fixture
def rng():
    return random.Random(0x5962BE5D763D318D17DB37325406BCE5)


def test_from_u512():
    assert Fq.from_raw(
        [0x1F8905A172AFFA8A, 0xDE45AD177DCF3306, 0xAAA7987907D73AE2, 0x24D349431D468E30]
    ) == Fq.from_u512([0xAAAAAAAAAAAAAAAA] * 8)


def test_sqrt_of_two_inv_squared():
    v = Fq.TWO_INV.square().sqrt()
    assert v == Fq.TWO_INV or -v == Fq.TWO_INV


def test_sqrt_random_squares(rng):
    for _ in range(500):
        a = Fq.random(rng)
        b = a.square()
        assert b.legendre() == Fq.ONE
        root = b.sqrt()
        assert a == root or a == -root


def test_sqrt_counting_squares():
    c = Fq.one()
    for _ in range(300):
        b = c.square()
        assert b.legendre() == Fq.ONE
        b = b.sqrt()
        if b != c:
            b = -b
        assert b == c
        c += Fq.one()


def test_sqrt_of_non_residue_raises():
    with pytest.raises(ValueError):
        (-Fq.one()).sqrt()


def test_legendre_values():
    assert (-Fq.one()).legendre() == NEGATIVE_ONE
    assert Fq.MULTIPLICATIVE_GENERATOR.legendre() == NEGATIVE_ONE
    assert Fq.zero().legendre() == Fq.zero()


def test_montgomery_constants():
    assert Fq.from_montgomery(int_to_limbs(R, 4)) == Fq.one()
    assert Fq.from_montgomery(int_to_limbs(R2, 4)) == Fq(R)
    assert Fq.from_montgomery(int_to_limbs(R3, 4)) == Fq(R2)
    assert (MODULUS * INV + 1) % (1 << 64) == 0
    assert NEGATIVE_ONE == -Fq.one()
    assert int(MODULUS_STR, 16) == MODULUS


def test_named_constants():
    assert Fq.TWO_INV.double() == Fq.one()
    assert Fq.ROOT_OF_UNITY == -Fq.one()
    assert Fq.ROOT_OF_UNITY * Fq.ROOT_OF_UNITY_INV == Fq.one()
    assert Fq.ZETA.pow(3) == Fq.one()
    assert Fq.ZETA.square() != Fq.one()
    assert Fq.DELTA == Fq(9)


def test_one_encoding():
    assert Fq.one().to_bytes() == b"\x01" + bytes(31)
    assert Fq.one().to_repr() == Fq.one().to_bytes()


def test_serialization_round_trip(rng):
    for _ in range(200):
        a = Fq.random(rng)
        data = a.to_bytes()
        assert len(data) == 32
        assert Fq.from_bytes(data) == a
        assert Fq.from_repr(a.to_repr()) == a


def test_from_bytes_rejects_modulus():
    with pytest.raises(ValueError):
        Fq.from_bytes(MODULUS.to_bytes(32, "little"))


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        Fq.from_bytes(bytes(31))


def test_from_uniform_bytes_matches_u512(rng):
    data = rng.randbytes(64)
    limbs = [int.from_bytes(data[i : i + 8], "little") for i in range(0, 64, 8)]
    assert Fq.from_uniform_bytes(data) == Fq.from_u512(limbs)


def test_from_uniform_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        Fq.from_uniform_bytes(bytes(32))


def test_field_axioms(rng):
    for _ in range(200):
        a, b, c = Fq.random(rng), Fq.random(rng), Fq.random(rng)
        assert a + b == b + a
        assert a * b == b * a
        assert (a + b) + c == a + (b + c)
        assert (a * b) * c == a * (b * c)
        assert a * (b + c) == a * b + a * c
        assert a - a == Fq.zero()
        assert a + (-a) == Fq.zero()
        assert a.double() == a + a
        assert a.square() == a * a
        if not a.is_zero():
            assert a * a.invert() == Fq.one()
            assert (b / a) * a == b


def test_invert_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Fq.zero().invert()


def test_pow_accepts_limbs(rng):
    a = Fq.random(rng)
    exponent = 0xC19139CB84C680A6E14116DA060561765E05AA45A1C72A34F082305B61F3F52
    assert a.pow(int_to_limbs(exponent, 4)) == a.pow(exponent)
    assert a.pow(MODULUS) == a


def test_pow_rejects_negative():
    with pytest.raises(ValueError):
        Fq.one().pow(-1)


def test_from_raw_reduces():
    assert Fq.from_raw(int_to_limbs(MODULUS, 4)) == Fq.zero()
    assert Fq.from_raw(int_to_limbs(MODULUS + 5, 4)) == Fq(5)


def test_is_odd_and_is_zero():
    assert Fq.one().is_odd()
    assert not (-Fq.one()).is_odd()
    assert Fq.zero().is_zero()
    assert not Fq.one().is_zero()


def test_ordering():
    assert Fq(1) < Fq(2)
    assert -Fq.one() > Fq(2)
    assert sorted([Fq(3), Fq(1), Fq(2)]) == [Fq(1), Fq(2), Fq(3)]


def test_equal_elements_hash_equal():
    assert hash(Fq(7)) == hash(Fq(MODULUS + 7))