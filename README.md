# bnpair

Arithmetic on the BN254 (alt_bn128) pairing-friendly curve, in plain Python
and with no dependencies beyond the standard library.

## What is in it

- `bnpair.arithmetic`: helpers on 64-bit limbs: `adc`, `sbb`, `mac`, `macx`,
  `mul_512`, and `limbs_to_int` / `int_to_limbs` for moving between
  little-endian limb sequences and Python integers.
- `bnpair.fq`: the base field `Fq`. An element holds its canonical integer
  value modulo q. Constructors include `from_raw` (canonical limbs),
  `from_montgomery` (limbs in Montgomery form, as constant tables are often
  written), `from_u512`, `from_uniform_bytes`, `from_bytes` / `from_repr`
  (32 little-endian bytes, rejecting values not below q) and `random`.
- `bnpair.fq2`, `bnpair.fq6`, `bnpair.fq12`: the extension tower
  `Fq2 = Fq[u]/(u² + 1)`, `Fq6 = Fq2[v]/(v³ − (9 + u))` and
  `Fq12 = Fq6[w]/(w² − v)`, with Frobenius maps, sparse multiplications
  (`Fq6.mul_by_1`, `Fq6.mul_by_01`, `Fq12.mul_by_014`, `Fq12.mul_by_034`)
  and `Fq12.cyclotomic_square`. `Fq2` also has `sqrt`, `norm`, `legendre`
  and a 64-byte encoding (`to_bytes` / `from_bytes`).
- `bnpair.curve`: the groups `G1` (y² = x³ + 3 over Fq) and `G2` (the sextic
  twist over Fq2) in projective coordinates, and their affine forms
  `G1Affine` and `G2Affine`. Points add, subtract, negate and multiply by
  Python integers. `G2.clear_cofactor` and `G2.is_torsion_free` work on the
  twist; for `G1` they are trivial. The group order is `SCALAR_MODULUS`.
- `bnpair.engine`: the target group `Gt` (written additively), the
  precomputed line coefficients `G2Prepared`, `multi_miller_loop`,
  `Gt.final_exponentiation` and `pairing`.

All field methods return new values; nothing is changed in place.
`invert` raises `ZeroDivisionError` for zero, and `sqrt` raises `ValueError`
for a non-residue. `random` takes an optional `random.Random`-like object
(it uses `randbytes`, and for curve points also `getrandbits`); without one it
draws from the operating system.

## Installation

```
pip install .
```

## Example

```python
from bnpair.curve import G1, G2
from bnpair.engine import pairing

g1 = G1.generator()
g2 = G2.generator()

left = pairing(g1.double().to_affine(), g2.to_affine())
right = pairing(g1.to_affine(), g2.double().to_affine())
assert left == right
```

Field elements support `+`, `-`, `*`, `/` and unary `-`, and compare with `==`:

```python
from bnpair.fq import Fq

a = Fq.from_raw([5, 0, 0, 0])
assert a * a.invert() == Fq.one()
assert a.square().sqrt() in (a, -a)
```

Several pairings can share one Miller loop and one final exponentiation:

```python
from bnpair.engine import G2Prepared, multi_miller_loop

terms = [(g1.to_affine(), G2Prepared.from_affine(g2.to_affine()))]
result = multi_miller_loop(terms).final_exponentiation()
assert result == pairing(g1.to_affine(), g2.to_affine())
```

## What it does not do

- There is no scalar field type: scalars are plain Python integers.
- There is no hashing to the curve, no GLV endomorphism or scalar
  decomposition, and no byte encoding of curve points.
- The code is written for clarity, not speed, and does not run in constant
  time. Do not use it where timing side channels matter.

## Tests

```
pip install .[test]
pytest
```