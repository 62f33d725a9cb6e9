"""Elliptic curve point in projective coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from kangmath.bigint import Int
from kangmath.field import PrimeField
from kangmath.intformat import to_base16


@dataclass(frozen=True)
class Point:
    """Projective point ``(x, y, z)``; plain integers are converted to :class:`Int`."""

    x: Int = Int(0)
    y: Int = Int(0)
    z: Int = Int(0)

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            value = getattr(self, name)
            if not isinstance(value, Int):
                object.__setattr__(self, name, Int(value))

    def is_zero(self) -> bool:
        """True when both ``x`` and ``y`` are zero."""
        return self.x.is_zero() and self.y.is_zero()

    def reduced(self, field: PrimeField) -> Point:
        """Return the affine form ``(x / z, y / z, 1)`` in ``field``.

        A zero ``z`` has no inverse, which gives zero ``x`` and ``y``.
        """
        inverse = field.inv(self.z)
        return Point(field.mul(self.x, inverse), field.mul(self.y, inverse), Int(1))

    def __str__(self) -> str:
        return f"X={to_base16(self.x)}\nY={to_base16(self.y)}\nZ={to_base16(self.z)}\n"