# ----- modular.py -----
from shareweave.errors import NotInvertible
from shareweave.numtext import to_decimal


def reduce_mod(a: int, m: int) -> int:
    """Return a mod m in [0, m)."""
    # Python's % already follows the sign of the divisor
    return a % m


def extended_gcd(a: int, b: int):
    """Return (g, s, t) with a*s + b*t == g == gcd(a, b)."""
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    return old_r, old_s, old_t


def mod_inverse(a: int, m: int) -> int:
    """
    Multiplicative inverse of a modulo m via the extended Euclidean algorithm.
    The caller guarantees m is prime; only gcd(a, m) == 1 is checked here.
    """
    if m <= 1:
        raise ValueError(f"modulus must be greater than 1, got {to_decimal(m)}")
    g, s, _ = extended_gcd(reduce_mod(a, m), m)
    if g != 1:
        raise NotInvertible(a, m)
    return reduce_mod(s, m)
