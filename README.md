# kangmath

Arithmetic building blocks for elliptic-curve work. The package has no
dependencies outside the standard library.

## Modules

- `kangmath.bigint.Int` is an immutable 320-bit two's-complement integer: 256
  usable bits plus a spare 64-bit limb.
  - Addition, subtraction, multiplication, negation and left shift wrap around
    the fixed width. Right shift (`>>`) extends the sign.
  - Comparison (`==`, `<` and so on) uses the unsigned bit pattern. `int(x)`
    gives the signed value and `x.raw` gives the unsigned one.
  - Helpers include `is_zero`, `is_negative`, `bit_length`, `size32`, `size64`,
    `get_bit`, `get_byte`, `set_byte`, `swap_bit`, `lowest_bit`, `mask_words`
    and `to_float`.
  - `Int.from_bytes32` and `to_bytes32` convert to and from 32 big-endian bytes.
- `kangmath.intformat` converts between `Int` and text.
  - `from_base_n` and `to_base_n` work in any base with its own charset. Letters
    are matched case-insensitively, and an unknown character raises `ValueError`.
  - `from_base10`, `from_base16`, `to_base10` and `to_base16` are the decimal and
    hexadecimal shortcuts. Output is signed and hexadecimal is upper case.
  - `to_base2` is a dump of 32-bit words, `block_str` gives eight hex words, and
    `c64_str` gives a C initialiser list of 64-bit limbs.
- `kangmath.intdiv` provides division and GCD.
  - `divmod_int` divides the unsigned bit patterns and raises `ZeroDivisionError`
    for a zero divisor.
  - `mod` and `mult_mod_n` reduce modulo `n`.
  - `gcd` works on absolute values. If one argument is zero it returns the other
    unchanged.
- `kangmath.field.PrimeField` is arithmetic modulo an odd characteristic `p`.
  Any other `p` raises `ValueError`.
  - `add`, `sub`, `neg` and `double` make a single conditional correction, so
    `neg(0)` returns `p`.
  - `mul`, `square`, `cube` and `exp` always return fully reduced results.
  - `inv` returns zero when there is no inverse.
  - `has_sqrt` applies Euler's criterion. `sqrt` returns zero for a non-residue
    and uses Tonelli–Shanks when `p % 4 == 1`.
  - `montgomery_mult` computes `a * b * R**-1`. The properties `r`, `r2`, `r3`
    and `r4` hold the powers of `R`.
  - `batch_inv` inverts a list with a single inversion. If any input is zero,
    every result is zero.
- `kangmath.point.Point` is a frozen projective point `(x, y, z)`.
  - `is_zero` is true when both `x` and `y` are zero.
  - `reduced(field)` returns the affine form `(x/z, y/z, 1)`.
  - `str()` prints the coordinates in hexadecimal.
- `kangmath.mtrandom` provides a Mersenne Twister (MT19937) generator.
  - `MersenneTwister(seed)` offers `seed`, `next_u32` and `next_double`. Doubles
    have 53-bit precision and fall in `[0, 1)`.
  - The module-level `rseed`, `rndl` and `rnd` use one shared generator, seeded
    with 5489 at import.

## What it does not do

The package contains no curve group law: it does not add or double points. It
does not derive public keys or encode and decode public-key hex. It does not
provide random big integers, primality testing, or timing utilities. It has no
command-line program.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from kangmath.bigint import Int
from kangmath.field import PrimeField
from kangmath.intformat import from_base16, to_base16
from kangmath.mtrandom import MersenneTwister
from kangmath.point import Point

f = PrimeField(1000003)
a = Int(12345)
assert f.mul(a, f.inv(a)).is_one()
assert f.square(f.sqrt(25)) == 25

print(Point(2, 4, 2).reduced(f))        # X=1, Y=2, Z=1

k = from_base16("deadbeef")
print(to_base16(k))                     # DEADBEEF
print(to_base16(Int(-1)))               # -1

rng = MersenneTwister(5489)
print(rng.next_u32())                   # 3499211612
```