"""Mersenne Twister (MT19937) pseudo-random generator with a shared default instance."""

from __future__ import annotations

STATE_LEN = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF
_U32 = 0xFFFFFFFF

DEFAULT_SEED = 5489


class MersenneTwister:
    """MT19937 generator seeded with the reference 32-bit initialisation."""

    __slots__ = ("_key", "_pos")

    def __init__(self, seed: int) -> None:
        self._key: list[int] = []
        self._pos = STATE_LEN
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the state from a seed; only its low 32 bits are used."""
        value = seed & _U32
        key = []
        for pos in range(STATE_LEN):
            key.append(value)
            value = (1812433253 * (value ^ (value >> 30)) + pos + 1) & _U32
        self._key = key
        self._pos = STATE_LEN

    def _twist(self) -> None:
        key = self._key
        for i in range(STATE_LEN):
            y = (key[i] & _UPPER_MASK) | (key[(i + 1) % STATE_LEN] & _LOWER_MASK)
            key[i] = key[(i + _M) % STATE_LEN] ^ (y >> 1) ^ (_MATRIX_A if y & 1 else 0)
        self._pos = 0

    def next_u32(self) -> int:
        """Return the next tempered 32-bit output."""
        if self._pos == STATE_LEN:
            self._twist()
        y = self._key[self._pos]
        self._pos += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _U32

    def next_double(self) -> float:
        """Return a 53-bit precision float in [0, 1)."""
        a = self.next_u32() >> 5
        b = self.next_u32() >> 6
        return (a * 67108864.0 + b) / 9007199254740992.0


_default = MersenneTwister(DEFAULT_SEED)


def rseed(seed: int) -> None:
    """Seed the shared generator."""
    _default.seed(seed)


def rndl() -> int:
    """Return the next 32-bit value of the shared generator."""
    return _default.next_u32()


def rnd() -> float:
    """Return the next float in [0, 1) of the shared generator."""
    return _default.next_double()