import random

import pytest

from bnpair.curve import G1, G2, SCALAR_MODULUS, G1Affine, G2Affine
from bnpair.engine import G2Prepared, Gt, multi_miller_loop, pairing
from bnpair.fq12 import Fq12


@pytest.fixture(scope="module")
def base_pairing():
    return pairing(G1Affine.generator(), G2Affine.generator())


def test_pairing_moves_doubling_between_groups():
    g1 = G1.generator()
    g2 = G2.generator()
    pair12 = pairing(g1.to_affine(), g2.double().to_affine())
    pair21 = pairing(g1.double().to_affine(), g2.to_affine())
    assert pair12 == pair21

    pair12 = pairing(g1.to_affine(), g2.double().double().to_affine())
    pair21 = pairing(g1.double().to_affine(), g2.double().to_affine())
    assert pair12 == pair21


def test_random_bilinearity():
    rng = random.Random(0x5962BE5D)
    a = G1.generator() * rng.randrange(1, SCALAR_MODULUS)
    b = G2.generator() * rng.randrange(1, SCALAR_MODULUS)
    c = rng.randrange(1, SCALAR_MODULUS)
    d = rng.randrange(1, SCALAR_MODULUS)

    acbd = pairing((a * c).to_affine(), (b * d).to_affine())
    adbc = pairing((a * d).to_affine(), (b * c).to_affine())
    ab = pairing(a.to_affine(), b.to_affine())
    abcd = Gt(ab.value.pow((c * d) % SCALAR_MODULUS))

    assert acbd == adbc
    assert acbd == abcd
    assert ab * ((c * d) % SCALAR_MODULUS) == abcd


def test_pairing_is_non_degenerate_with_order_r(base_pairing):
    assert not base_pairing.is_identity()
    assert base_pairing.value.pow(SCALAR_MODULUS) == Fq12.one()
    assert (base_pairing * SCALAR_MODULUS).is_identity()


def test_identity_inputs_give_one(base_pairing):
    rng = random.Random(7)
    b = G2Prepared.from_affine(G2.random(rng).to_affine())
    a = G1.random(rng).to_affine()
    z1 = G1Affine.identity()
    z2 = G2Prepared.from_affine(G2Affine.identity())

    assert multi_miller_loop([(z1, b)]).final_exponentiation().value == Fq12.one()
    assert multi_miller_loop([(a, z2)]).final_exponentiation().value == Fq12.one()
    assert pairing(G1Affine.identity(), G2Affine.generator()).is_identity()


def test_identity_terms_are_skipped_in_multi_loop():
    rng = random.Random(11)
    a = G1.random(rng).to_affine()
    b = G2Prepared.from_affine(G2.random(rng).to_affine())
    c = G1.random(rng).to_affine()
    d = G2Prepared.from_affine(G2.random(rng).to_affine())
    z1 = G1Affine.identity()
    z2 = G2Prepared.from_affine(G2Affine.identity())

    assert (
        multi_miller_loop([(z1, b), (c, d)]).final_exponentiation()
        == multi_miller_loop([(a, z2), (c, d)]).final_exponentiation()
    )


def test_double_miller_loop_matches_product():
    rng = random.Random(3)
    a = G1.random(rng).to_affine()
    b = G2.random(rng).to_affine()
    c = G1.random(rng).to_affine()
    d = G2.random(rng).to_affine()

    expected = Gt(pairing(a, b).value * pairing(c, d).value)
    combined = multi_miller_loop(
        [(a, G2Prepared.from_affine(b)), (c, G2Prepared.from_affine(d))]
    ).final_exponentiation()
    assert combined == expected


def test_gt_group_laws(base_pairing):
    e = base_pairing
    assert (e + (-e)).is_identity()
    assert (e - e).is_identity()
    assert e.double() == e + e
    assert e * 3 == e + e + e
    assert e * -1 == -e
    assert sum([e, e]) == e.double()
    assert Gt.identity() + e == e


def test_gt_rejects_other_operands(base_pairing):
    assert base_pairing + Gt.identity() == base_pairing
    with pytest.raises(TypeError):
        base_pairing + 1
    with pytest.raises(TypeError):
        base_pairing * 1.5


def test_final_exponentiation_of_zero_fails():
    with pytest.raises(ZeroDivisionError):
        Gt(Fq12.zero()).final_exponentiation()


def test_prepared_identity_and_coefficient_count():
    zero = G2Prepared.from_affine(G2Affine.identity())
    assert zero.is_zero()
    assert zero.coeffs == ()

    prepared = G2Prepared.from_affine(G2Affine.generator())
    assert not prepared.is_zero()
    assert len(prepared.coeffs) == 91


def test_malformed_prepared_point_is_rejected():
    prepared = G2Prepared.from_affine(G2Affine.generator())
    short = G2Prepared(coeffs=prepared.coeffs[:-1], infinity=False)
    with pytest.raises(ValueError):
        multi_miller_loop([(G1Affine.generator(), short)])

    long = G2Prepared(coeffs=prepared.coeffs + prepared.coeffs[:1], infinity=False)
    with pytest.raises(ValueError):
        multi_miller_loop([(G1Affine.generator(), long)])