"""Division, remainder and GCD for :class:`~kangmath.bigint.Int` values.

Division works on the unsigned bit patterns, as the fixed-width long
division does; the GCD works on absolute values.
"""

from __future__ import annotations

import math

from kangmath.bigint import Int


def divmod_int(value: Int | int, divisor: Int | int) -> tuple[Int, Int]:
    """Return ``(quotient, remainder)`` of the unsigned bit patterns.

    Raises :class:`ZeroDivisionError` when ``divisor`` is zero.
    """
    dividend = Int(value).raw
    d = Int(divisor).raw
    if d == 0:
        raise ZeroDivisionError("division of Int by zero")
    if d > dividend:
        return Int(0), Int(dividend)
    if d == dividend:
        return Int(1), Int(0)
    quotient, remainder = divmod(dividend, d)
    return Int(quotient), Int(remainder)


def mod(value: Int | int, n: Int | int) -> Int:
    """Remainder of ``value`` divided by ``n`` (unsigned)."""
    return divmod_int(value, n)[1]


def mult_mod_n(a: Int | int, b: Int | int, n: Int | int) -> Int:
    """``a * b`` (wrapped to the fixed width) reduced modulo ``n``."""
    return mod(Int(a) * Int(b), n)


def gcd(a: Int | int, b: Int | int) -> Int:
    """Greatest common divisor.

    If one argument is zero the other is returned unchanged; otherwise the
    result is the GCD of the absolute values.
    """
    u = Int(a)
    v = Int(b)
    if u.is_zero():
        return v
    if v.is_zero():
        return u
    return Int(math.gcd(int(u.abs()), int(v.abs())))