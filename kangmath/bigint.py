"""Fixed-width two's complement integer (320 bits, 256 usable plus a spare limb)."""

from __future__ import annotations

import functools

BISIZE = 256
NB64BLOCK = 5
NB32BLOCK = 10
WIDTH = 64 * NB64BLOCK
NB_BYTES = WIDTH // 8

_MASK = (1 << WIDTH) - 1
_SIGN = 1 << (WIDTH - 1)
_MASK256 = (1 << 256) - 1


def _to_raw(value: object) -> int:
    if isinstance(value, Int):
        return value._raw
    if isinstance(value, int):
        return value & _MASK
    raise TypeError(f"cannot convert {type(value).__name__} to Int")


@functools.total_ordering
class Int:
    """Immutable 320-bit integer with wrap-around arithmetic.

    Ordering compares the raw (unsigned) bit patterns; ``int()`` gives the
    signed two's complement value.
    """

    __slots__ = ("_raw",)

    def __init__(self, value: int | Int = 0) -> None:
        self._raw = _to_raw(value)

    @classmethod
    def from_bytes32(cls, data: bytes) -> Int:
        """Build a value from 32 big-endian bytes."""
        if len(data) != 32:
            raise ValueError(f"expected 32 bytes, got {len(data)}")
        return cls(int.from_bytes(data, "big"))

    def to_bytes32(self) -> bytes:
        """Return the low 256 bits as 32 big-endian bytes."""
        return (self._raw & _MASK256).to_bytes(32, "big")

    @property
    def raw(self) -> int:
        """The unsigned bit pattern."""
        return self._raw

    def __int__(self) -> int:
        return self._raw - (1 << WIDTH) if self._raw & _SIGN else self._raw

    def __index__(self) -> int:
        return int(self)

    def __repr__(self) -> str:
        return f"Int(0x{self._raw:X})"

    def __eq__(self, other: object) -> bool:
        try:
            return self._raw == _to_raw(other)
        except TypeError:
            return NotImplemented

    def __lt__(self, other: object) -> bool:
        try:
            return self._raw < _to_raw(other)
        except TypeError:
            return NotImplemented

    def __hash__(self) -> int:
        return hash(self._raw)

    def __add__(self, other: object) -> Int:
        try:
            return Int(self._raw + _to_raw(other))
        except TypeError:
            return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> Int:
        try:
            return Int(self._raw - _to_raw(other))
        except TypeError:
            return NotImplemented

    def __rsub__(self, other: object) -> Int:
        try:
            return Int(_to_raw(other) - self._raw)
        except TypeError:
            return NotImplemented

    def __mul__(self, other: object) -> Int:
        try:
            return Int(self._raw * _to_raw(other))
        except TypeError:
            return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> Int:
        return Int(-self._raw)

    def __lshift__(self, n: int) -> Int:
        if n < 0:
            raise ValueError("negative shift count")
        return Int(self._raw << n)

    def __rshift__(self, n: int) -> Int:
        """Arithmetic (sign-extending) right shift."""
        if n < 0:
            raise ValueError("negative shift count")
        return Int(int(self) >> n)

    def abs(self) -> Int:
        return -self if self.is_negative() else self

    def is_zero(self) -> bool:
        return self._raw == 0

    def is_one(self) -> bool:
        return self._raw == 1

    def is_negative(self) -> bool:
        return bool(self._raw & _SIGN)

    def is_positive(self) -> bool:
        return not self.is_negative()

    def is_strict_positive(self) -> bool:
        return self.is_positive() and not self.is_zero()

    def is_even(self) -> bool:
        return not self._raw & 1

    def is_odd(self) -> bool:
        return bool(self._raw & 1)

    def bit_length(self) -> int:
        """Number of significant bits of the absolute value."""
        return self.abs()._raw.bit_length()

    def size32(self) -> int:
        """Number of significant 32-bit words (at least 1)."""
        return max(1, (self._raw.bit_length() + 31) // 32)

    def size64(self) -> int:
        """Number of significant 64-bit words (at least 1)."""
        return max(1, (self._raw.bit_length() + 63) // 64)

    def get_bit(self, n: int) -> int:
        if not 0 <= n < WIDTH:
            raise IndexError(f"bit {n} out of range")
        return (self._raw >> n) & 1

    def get_byte(self, n: int) -> int:
        """Byte ``n``, counting from the least significant."""
        if not 0 <= n < NB_BYTES:
            raise IndexError(f"byte {n} out of range")
        return (self._raw >> (8 * n)) & 0xFF

    def set_byte(self, n: int, byte: int) -> Int:
        """Return a copy with byte ``n`` replaced."""
        if not 0 <= n < NB_BYTES:
            raise IndexError(f"byte {n} out of range")
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte value {byte} out of range")
        shift = 8 * n
        return Int((self._raw & ~(0xFF << shift)) | (byte << shift))

    def swap_bit(self, n: int) -> Int:
        """Return a copy with bit ``n`` flipped."""
        if not 0 <= n < WIDTH:
            raise IndexError(f"bit {n} out of range")
        return Int(self._raw ^ (1 << n))

    def lowest_bit(self) -> int:
        """Index of the lowest set bit."""
        if self._raw == 0:
            raise ValueError("zero has no set bit")
        return (self._raw & -self._raw).bit_length() - 1

    def mask_words(self, n: int) -> Int:
        """Return a copy keeping only the ``n`` low 32-bit words."""
        if n < 0:
            raise ValueError("negative word count")
        if n >= NB32BLOCK:
            return self
        return Int(self._raw & ((1 << (32 * n)) - 1))

    def to_float(self) -> float:
        """The unsigned bit pattern as a float."""
        return float(self._raw)