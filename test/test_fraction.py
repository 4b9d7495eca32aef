import unittest
from math import gcd
from shareweave.encoding import encode
from shareweave.errors import DivisionByZero
from shareweave.fraction import Fraction

class FractionTests(unittest.TestCase):
    def test_normalization(self):
        f = Fraction(6, -4)
        self.assertEqual((f.num, f.den), (-3, 2))
        self.assertEqual((Fraction(0, -5).num, Fraction(0, -5).den), (0, 1))
        self.assertEqual((Fraction(-8, -12).num, Fraction(-8, -12).den), (2, 3))
        self.assertEqual(Fraction(5).den, 1)

    def test_normalization_is_idempotent(self):
        """Rebuilding from a normalized pair gives the same pair"""
        for num in range(-12, 13):
            for den in [d for d in range(-9, 10) if d != 0]:
                f = Fraction(num, den)
                again = Fraction(f.num, f.den)
                self.assertEqual((again.num, again.den), (f.num, f.den))
                self.assertGreater(f.den, 0)
                self.assertEqual(gcd(abs(f.num), f.den), 1)

    def test_zero_denominator(self):
        with self.assertRaises(DivisionByZero):
            Fraction(1, 0)
        # also usable as a plain ZeroDivisionError
        with self.assertRaises(ZeroDivisionError):
            Fraction(0, 0)

    def test_arithmetic(self):
        half, third = Fraction(1, 2), Fraction(1, 3)
        self.assertEqual(half.add(third), Fraction(5, 6))
        self.assertEqual(half.subtract(third), Fraction(1, 6))
        self.assertEqual(Fraction(2, 3).multiply(Fraction(3, 4)), half)
        self.assertEqual(half.divide(Fraction(1, 4)), Fraction(2))
        self.assertEqual(half + third, Fraction(5, 6))
        self.assertEqual(-half, Fraction(-1, 2))

    def test_mixed_with_integers(self):
        half = Fraction(1, 2)
        self.assertEqual(half + 1, Fraction(3, 2))
        self.assertEqual(1 + half, Fraction(3, 2))
        self.assertEqual(1 - half, half)
        self.assertEqual(half * 4, 2)
        self.assertEqual(3 / Fraction(3, 4), Fraction(4))
        self.assertEqual(half.multiply(6), Fraction(3))

    def test_divide_by_zero(self):
        with self.assertRaises(DivisionByZero):
            Fraction(1, 2).divide(Fraction(0))
        with self.assertRaises(DivisionByZero):
            Fraction(1, 2) / 0

    def test_operations_return_new_values(self):
        f = Fraction(1, 2)
        f.add(Fraction(1, 2))
        self.assertEqual(f, Fraction(1, 2))
        with self.assertRaises(AttributeError):
            f.num = 5

    def test_no_float_coercion(self):
        with self.assertRaises(TypeError):
            Fraction(1.5)
        with self.assertRaises(TypeError):
            Fraction(1, 2) + 0.5
        with self.assertRaises(TypeError):
            Fraction(1, 2).add(0.5)
        with self.assertRaises(TypeError):
            float(Fraction(1, 2))

    def test_rendering_and_integer_conversion(self):
        self.assertEqual(str(Fraction(1, 2)), "1/2")
        self.assertEqual(str(Fraction(3, -2)), "-3/2")
        self.assertEqual(str(Fraction(8, 2)), "4")
        self.assertTrue(Fraction(8, 4).is_integer())
        self.assertEqual(Fraction(8, 4).to_integer(), 2)
        self.assertFalse(Fraction(1, 2).is_integer())
        with self.assertRaises(ValueError):
            Fraction(1, 2).to_integer()

    def test_equality_and_hash(self):
        self.assertEqual(Fraction(4, 2), 2)
        self.assertEqual(hash(Fraction(4, 2)), hash(2))
        self.assertEqual(hash(Fraction(2, 4)), hash(Fraction(1, 2)))
        self.assertNotEqual(Fraction(1, 2), Fraction(1, 3))

    def test_large_values_stay_exact(self):
        big = Fraction(10**60 + 1, 3 * 10**30)
        total = big.multiply(3 * 10**30).subtract(10**60)
        self.assertEqual(total, 1)

    def test_rendering_past_the_digit_limit(self):
        big = Fraction(-(7**6000), 3)
        numerator = "-" + encode(7**6000, 10)
        self.assertEqual(str(big), numerator + "/3")
        self.assertEqual(repr(big), f"Fraction({numerator}, 3)")
        with self.assertRaises(ValueError) as cm:
            big.to_integer()
        self.assertIn(numerator, str(cm.exception))

if __name__ == '__main__':
    unittest.main()
