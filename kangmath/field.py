"""Arithmetic in a prime field GF(p) on :class:`~kangmath.bigint.Int` values."""

from __future__ import annotations

from collections.abc import Iterable

from kangmath.bigint import Int


def _as_int(value: Int | int) -> Int:
    return value if isinstance(value, Int) else Int(value)


class PrimeField:
    """Prime field of odd characteristic ``p``.

    Operands are expected to lie in ``[0, p)``. Addition, subtraction and
    negation keep the fixed-width conditional-correction behaviour, so
    ``neg(0)`` is ``p`` rather than ``0``. Multiplicative results are always
    fully reduced.

    The Montgomery constants follow the word size of ``p``: ``R`` is
    ``2 ** (64 * k)`` modulo ``p`` with ``k`` half the number of significant
    32-bit words of ``p`` (at least one).
    """

    __slots__ = ("_p", "_value", "_montgomery_r", "_r", "_r2", "_r3", "_r4", "_r_inv")

    def __init__(self, p: Int | int) -> None:
        modulus = _as_int(p)
        value = modulus.raw
        if modulus.is_negative() or value < 3 or value % 2 == 0:
            raise ValueError("field characteristic must be an odd value of at least 3")
        self._p = modulus
        self._value = value
        msize = max(1, modulus.size32() // 2)
        self._montgomery_r = 1 << (64 * msize)
        r = self._montgomery_r % value
        self._r = Int(r)
        self._r2 = Int(r * r % value)
        self._r3 = Int(r * r * r % value)
        self._r4 = Int(pow(r, 4, value))
        self._r_inv = pow(r, -1, value)

    @property
    def p(self) -> Int:
        """The field characteristic."""
        return self._p

    @property
    def r(self) -> Int:
        """Montgomery ``R`` modulo ``p``."""
        return self._r

    @property
    def r2(self) -> Int:
        """``R ** 2`` modulo ``p``."""
        return self._r2

    @property
    def r3(self) -> Int:
        """``R ** 3`` modulo ``p``."""
        return self._r3

    @property
    def r4(self) -> Int:
        """``R ** 4`` modulo ``p``."""
        return self._r4

    def _reduce(self, value: Int | int) -> int:
        return _as_int(value).raw % self._value

    # Additive operations ---------------------------------------------------

    def add(self, a: Int | int, b: Int | int) -> Int:
        """``a + b`` with a single conditional subtraction of ``p``."""
        total = _as_int(a) + _as_int(b)
        reduced = total - self._p
        return reduced if reduced.is_positive() else total

    def sub(self, a: Int | int, b: Int | int) -> Int:
        """``a - b`` with a single conditional addition of ``p``."""
        diff = _as_int(a) - _as_int(b)
        return diff + self._p if diff.is_negative() else diff

    def neg(self, a: Int | int) -> Int:
        """``p - a``."""
        return self._p - _as_int(a)

    def double(self, a: Int | int) -> Int:
        """``2 * a`` with a single conditional subtraction of ``p``."""
        return self.add(a, a)

    # Multiplicative operations ---------------------------------------------

    def mul(self, a: Int | int, b: Int | int) -> Int:
        """``a * b`` modulo ``p``."""
        return Int(self._reduce(a) * self._reduce(b) % self._value)

    def square(self, a: Int | int) -> Int:
        """``a ** 2`` modulo ``p``."""
        value = self._reduce(a)
        return Int(value * value % self._value)

    def cube(self, a: Int | int) -> Int:
        """``a ** 3`` modulo ``p``."""
        return Int(pow(self._reduce(a), 3, self._value))

    def exp(self, a: Int | int, e: Int | int) -> Int:
        """``a ** e`` modulo ``p``; ``e`` must not be negative."""
        exponent = int(_as_int(e))
        if exponent < 0:
            raise ValueError("exponent must not be negative")
        if exponent == 0:
            return Int(1)
        return Int(pow(self._reduce(a), exponent, self._value))

    def inv(self, a: Int | int) -> Int:
        """Inverse of ``a`` modulo ``p``, or zero when there is none."""
        try:
            return Int(pow(self._reduce(a), -1, self._value))
        except ValueError:
            return Int(0)

    def montgomery_mult(self, a: Int | int, b: Int | int) -> Int:
        """``a * b * R ** -1`` modulo ``p``."""
        return Int(self._reduce(a) * self._reduce(b) * self._r_inv % self._value)

    # Square roots ----------------------------------------------------------

    def _is_residue(self, value: int) -> bool:
        return pow(value, (self._value - 1) // 2, self._value) == 1

    def has_sqrt(self, a: Int | int) -> bool:
        """Euler's criterion: true when ``a`` is a non-zero quadratic residue."""
        return self._is_residue(self._reduce(a))

    def sqrt(self, a: Int | int) -> Int:
        """A square root of ``a`` modulo ``p``, or zero when there is none.

        Raises :class:`ValueError` if Tonelli-Shanks finds that ``p`` is not
        prime.
        """
        p = self._value
        value = self._reduce(a)
        if not self._is_residue(value):
            return Int(0)

        if p % 4 == 3:
            return Int(pow(value, (p + 1) // 4, p))

        s = p - 1
        e = 0
        while s % 2 == 0:
            s //= 2
            e += 1

        q = 2
        while self._is_residue(q):
            q += 1

        c = pow(q, s, p)
        t = pow(value, s, p)
        r = pow(value, (s + 1) // 2, p)
        m = e
        while t != 1:
            t2 = t
            i = 0
            while t2 != 1:
                t2 = t2 * t2 % p
                i += 1
                if i >= m:
                    raise ValueError("field characteristic is not prime")
            b = c
            for _ in range(m - i - 1):
                b = b * b % p
            m = i
            c = b * b % p
            t = t * c % p
            r = r * b % p
        return Int(r)

    # Batch operations ------------------------------------------------------

    def batch_inv(self, values: Iterable[Int | int]) -> list[Int]:
        """Invert every value with a single field inversion.

        If any value is zero, every result is zero.
        """
        items = [_as_int(v) for v in values]
        if not items:
            return []

        prefix = [items[0]]
        for item in items[1:]:
            prefix.append(self.mul(prefix[-1], item))

        inverse = self.inv(prefix[-1])
        result = [Int(0)] * len(items)
        for index in range(len(items) - 1, 0, -1):
            result[index] = self.mul(prefix[index - 1], inverse)
            inverse = self.mul(inverse, items[index])
        result[0] = inverse
        return result