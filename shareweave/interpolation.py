# ----- interpolation.py -----
"""
Lagrange interpolation at x = 0.

    secret = sum_i y_i * prod_{j != i} (0 - x_j) / (x_i - x_j)

The arithmetic is supplied by an explicit mode value: RationalMode keeps
exact fractions, ModularMode(p) works in the prime field Z/pZ.
"""
import warnings
from dataclasses import dataclass

from shareweave.errors import InexactResult, InsufficientShares, NotInvertible, SingularPoints
from shareweave.fraction import Fraction
from shareweave.modular import mod_inverse, reduce_mod
from shareweave.numtext import to_decimal


@dataclass(frozen=True)
class RationalMode:
    """Exact arithmetic over the rationals; no reduction, no rounding."""
    name = "rational"

    def zero(self):
        return Fraction(0)

    def term(self, x_i, y_i, others):
        basis = Fraction(1)
        for x_j in others:
            basis = basis.multiply(Fraction(-x_j, x_i - x_j))
        return basis.multiply(y_i)

    def add(self, total, term):
        return total.add(term)

    def finish(self, total):
        if total.is_integer():
            return total.to_integer()
        warnings.warn(InexactResult(total), stacklevel=3)
        return total


@dataclass(frozen=True)
class ModularMode:
    """Arithmetic in Z/pZ. The modulus is trusted to be prime."""
    modulus: int
    name = "modular"

    def __post_init__(self):
        if self.modulus <= 1:
            raise ValueError(f"modulus must be greater than 1, got {to_decimal(self.modulus)}")

    def zero(self):
        return 0

    def term(self, x_i, y_i, others):
        p = self.modulus
        numerator = 1
        denominator = 1
        for x_j in others:
            difference = reduce_mod(x_i - x_j, p)
            if difference == 0:
                raise SingularPoints(
                    f"x={to_decimal(x_i)} and x={to_decimal(x_j)} coincide modulo {to_decimal(p)}",
                    key=x_i,
                )
            numerator = reduce_mod(numerator * -x_j, p)
            denominator = reduce_mod(denominator * difference, p)

        try:
            inverse = mod_inverse(denominator, p)
        except NotInvertible as e:
            raise SingularPoints(
                f"Lagrange denominator for x={to_decimal(x_i)} is not invertible "
                f"modulo {to_decimal(p)}",
                key=x_i,
            ) from e
        return reduce_mod(reduce_mod(y_i * numerator, p) * inverse, p)

    def add(self, total, term):
        return reduce_mod(total + term, self.modulus)

    def finish(self, total):
        return total


def arithmetic_mode(modulus=None):
    """Modular arithmetic when a modulus is given, exact rationals otherwise."""
    if modulus is None:
        return RationalMode()
    return ModularMode(modulus)


def lagrange_at_zero(points, k, mode):
    """
    Evaluate the interpolating polynomial of the first `k` points at x = 0.

    `points` holds Share values or (x, y) pairs; surplus points are ignored.
    Raises InsufficientShares when fewer than `k` points are given and
    SingularPoints when two selected points share an x.
    """
    if k < 1:
        raise ValueError(f"threshold must be at least 1, got {to_decimal(k)}")
    points = [tuple(point) for point in points]
    if len(points) < k:
        raise InsufficientShares(len(points), k)

    selected = points[:k]
    seen = set()
    for x, _ in selected:
        if x in seen:
            raise SingularPoints(f"duplicate x={to_decimal(x)} among the selected shares", key=x)
        seen.add(x)

    total = mode.zero()
    for i, (x_i, y_i) in enumerate(selected):
        others = [x_j for j, (x_j, _) in enumerate(selected) if j != i]
        total = mode.add(total, mode.term(x_i, y_i, others))
    return mode.finish(total)


def interpolate_at_zero(points, k, modulus=None):
    """Recover P(0) from `points`, over Z/pZ if `modulus` is given."""
    return lagrange_at_zero(points, k, arithmetic_mode(modulus))
