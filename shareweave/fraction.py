# ----- fraction.py -----
from math import gcd

from shareweave.errors import DivisionByZero
from shareweave.numtext import to_decimal


def _check_integer(value, role):
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{role} must be an integer, got {type(value).__name__}")


class Fraction:
    """
    Exact rational number over Python integers.
    Always normalized: positive denominator, numerator and denominator coprime.
    Instances are immutable; every operation returns a new Fraction.
    """
    __slots__ = ("_num", "_den")

    def __init__(self, numerator: int, denominator: int = 1):
        _check_integer(numerator, "numerator")
        _check_integer(denominator, "denominator")
        if denominator == 0:
            raise DivisionByZero(f"fraction {to_decimal(numerator)}/0 has a zero denominator")

        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        common = gcd(numerator, denominator)
        self._num = numerator // common
        self._den = denominator // common

    @property
    def num(self) -> int:
        return self._num

    @property
    def den(self) -> int:
        return self._den

    @staticmethod
    def _coerce(other):
        if isinstance(other, Fraction):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return Fraction(other)
        return None

    @classmethod
    def _operand(cls, other):
        coerced = cls._coerce(other)
        if coerced is None:
            raise TypeError(f"unsupported operand type: {type(other).__name__}")
        return coerced

    def add(self, other):
        other = self._operand(other)
        return Fraction(self._num * other._den + other._num * self._den,
                        self._den * other._den)

    def subtract(self, other):
        other = self._operand(other)
        return Fraction(self._num * other._den - other._num * self._den,
                        self._den * other._den)

    def multiply(self, other):
        other = self._operand(other)
        return Fraction(self._num * other._num, self._den * other._den)

    def divide(self, other):
        other = self._operand(other)
        if other._num == 0:
            raise DivisionByZero(f"cannot divide {self} by zero")
        return Fraction(self._num * other._den, self._den * other._num)

    def __add__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __neg__(self):
        return Fraction(-self._num, self._den)

    def is_integer(self) -> bool:
        return self._den == 1

    def to_integer(self) -> int:
        if self._den != 1:
            raise ValueError(f"{self} is not an integer")
        return self._num

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._num == other._num and self._den == other._den

    def __hash__(self):
        if self._den == 1:
            return hash(self._num)
        return hash((self._num, self._den))

    def __str__(self):
        if self._den == 1:
            return to_decimal(self._num)
        return f"{to_decimal(self._num)}/{to_decimal(self._den)}"

    def __repr__(self):
        return f"Fraction({to_decimal(self._num)}, {to_decimal(self._den)})"
