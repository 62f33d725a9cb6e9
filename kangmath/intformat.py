"""Text conversions for :class:`~kangmath.bigint.Int` values."""

from __future__ import annotations

from kangmath.bigint import NB32BLOCK, NB64BLOCK, Int

DIGITS10 = "0123456789"
DIGITS16 = "0123456789ABCDEF"

_WORD32 = 0xFFFFFFFF
_WORD64 = 0xFFFFFFFFFFFFFFFF


def _check_base(base: int, charset: str) -> None:
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if len(charset) < base:
        raise ValueError(f"charset has {len(charset)} symbols, base {base} needs {base}")


def from_base_n(text: str, base: int, charset: str) -> Int:
    """Parse ``text`` written with the symbols of ``charset`` in ``base``.

    Letters are matched case-insensitively against the charset; the result
    wraps around the fixed width like every other :class:`Int` operation.
    An empty string parses as zero.
    """
    _check_base(base, charset)
    result = 0
    for position, char in enumerate(text):
        digit = charset.find(char.upper())
        if digit < 0 or char == "":
            raise ValueError(f"invalid character {char!r} at position {position}")
        result = result * base + digit
    return Int(result)


def to_base_n(value: Int | int, base: int, charset: str) -> str:
    """Render ``value`` as signed text in ``base`` using ``charset``."""
    _check_base(base, charset)
    number = int(Int(value))
    sign = "-" if number < 0 else ""
    number = abs(number)
    digits = []
    while True:
        number, digit = divmod(number, base)
        digits.append(charset[digit])
        if number == 0:
            break
    return sign + "".join(reversed(digits))


def from_base10(text: str) -> Int:
    """Parse a decimal string."""
    return from_base_n(text, 10, DIGITS10)


def from_base16(text: str) -> Int:
    """Parse a hexadecimal string (either case, no prefix)."""
    return from_base_n(text, 16, DIGITS16)


def to_base10(value: Int | int) -> str:
    """Signed decimal text."""
    return to_base_n(value, 10, DIGITS10)


def to_base16(value: Int | int) -> str:
    """Signed upper-case hexadecimal text."""
    return to_base_n(value, 16, DIGITS16)


def _words32(value: Int | int) -> list[int]:
    raw = Int(value).raw
    return [(raw >> (32 * i)) & _WORD32 for i in range(NB32BLOCK)]


def to_base2(value: Int | int) -> str:
    """Binary dump of all 32-bit words but the top one.

    Words are listed from the least significant; the bits of each word are
    written from its most significant bit.
    """
    return "".join(f"{word:032b}" for word in _words32(value)[: NB32BLOCK - 1])


def block_str(value: Int | int) -> str:
    """The low 256 bits as eight space-separated 32-bit hex words, high word first."""
    words = _words32(value)[: NB32BLOCK - 2]
    return " ".join(f"{word:08X}" for word in reversed(words))


def c64_str(value: Int | int, nb_digit: int) -> str:
    """The ``nb_digit`` low 64-bit limbs as a C initialiser list, low limb first."""
    if not 0 <= nb_digit <= NB64BLOCK:
        raise ValueError(f"digit count must be between 0 and {NB64BLOCK}, got {nb_digit}")
    raw = Int(value).raw
    limbs = ((raw >> (64 * i)) & _WORD64 for i in range(nb_digit))
    body = ",".join(f"0x{limb:x}ULL" if limb else "0ULL" for limb in limbs)
    return "{" + body + "}"