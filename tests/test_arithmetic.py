import pytest

from bnpair.arithmetic import (
    MASK64,
    adc,
    int_to_limbs,
    limbs_to_int,
    mac,
    macx,
    mul_512,
    sbb,
)

WORDS = [0, 1, 2, 0x3C208C16D87CFD47, 0x97816A916871CA8D, MASK64 - 1, MASK64]


@pytest.mark.parametrize("a", WORDS)
@pytest.mark.parametrize("b", WORDS)
@pytest.mark.parametrize("carry", [0, 1])
def test_adc_matches_integer_sum(a, b, carry):
    low, out = adc(a, b, carry)
    assert 0 <= low <= MASK64
    assert low + (out << 64) == a + b + carry


def test_adc_overflow_carries():
    assert adc(MASK64, 1, 0) == (0, 1)


@pytest.mark.parametrize("a", WORDS)
@pytest.mark.parametrize("b", WORDS)
def test_sbb_without_borrow_in(a, b):
    low, borrow = sbb(a, b, 0)
    if a >= b:
        assert (low, borrow) == (a - b, 0)
    else:
        assert borrow == MASK64
        assert low == (a - b) % (1 << 64)


@pytest.mark.parametrize("a", WORDS)
@pytest.mark.parametrize("b", WORDS[:-1])
def test_sbb_borrow_in_subtracts_one(a, b):
    assert sbb(a, b, MASK64) == sbb(a, b + 1, 0)


@pytest.mark.parametrize("a", WORDS)
@pytest.mark.parametrize("b", WORDS)
@pytest.mark.parametrize("c", WORDS)
def test_mac_and_macx(a, b, c):
    low, carry = mac(a, b, c, MASK64)
    assert low + (carry << 64) == a + b * c + MASK64
    assert carry <= MASK64
    low, carry = macx(a, b, c)
    assert low + (carry << 64) == a + b * c


@pytest.mark.parametrize(
    "a, b",
    [
        ((1, 2, 3, 4), (5, 6, 7, 8)),
        ((MASK64,) * 4, (MASK64,) * 4),
        ((0x3C208C16D87CFD47, 0x97816A916871CA8D, 0xB85045B68181585D, 0x30644E72E131A029), (9, 0, 0, 1)),
        ((0, 0, 0, 0), (MASK64, 1, 2, 3)),
    ],
)
def test_mul_512_is_full_product(a, b):
    product = mul_512(a, b)
    assert len(product) == 8
    assert limbs_to_int(product) == limbs_to_int(a) * limbs_to_int(b)


def test_mul_512_is_commutative():
    a = (0xD35D438DC58F0D9D, 0x0A78EB28F5C70B3D, 0x666EA36F7879462C, 0x0E0A77C19A07DF2F)
    b = (0xF32CFC5B538AFA89, 0xB5E71911D44501FB, 0x47AB1EFF0A417FF6, 0x06D89F71CAB8351F)
    assert mul_512(a, b) == mul_512(b, a)


def test_mul_512_rejects_wrong_length():
    with pytest.raises(ValueError):
        mul_512((1, 2, 3), (1, 2, 3, 4))


@pytest.mark.parametrize("value", [0, 1, MASK64, 1 << 64, (1 << 256) - 1, 0x30644E72E131A029B85045B68181585D97816A916871CA8D3C208C16D87CFD47])
def test_limbs_round_trip(value):
    limbs = int_to_limbs(value, 4)
    assert len(limbs) == 4
    assert all(0 <= limb <= MASK64 for limb in limbs)
    assert limbs_to_int(limbs) == value


def test_int_to_limbs_little_endian():
    assert int_to_limbs(1 << 64, 2) == (0, 1)


def test_int_to_limbs_rejects_negative():
    with pytest.raises(ValueError):
        int_to_limbs(-1, 4)


def test_int_to_limbs_rejects_overflow():
    with pytest.raises(ValueError):
        int_to_limbs(1 << 256, 4)


def test_limbs_to_int_rejects_large_limb():
    with pytest.raises(ValueError):
        limbs_to_int([MASK64 + 1])