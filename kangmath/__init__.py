"""Fixed-width big integers, prime-field arithmetic, projective points and a Mersenne Twister."""

__version__ = "2.2.0"

__all__ = ["bigint", "field", "intdiv", "intformat", "mtrandom", "point"]