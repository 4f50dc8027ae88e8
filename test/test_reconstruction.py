import random
import unittest
from unittest import mock

from sharevote.combinatorics import combinations
from sharevote.crypto import lcm, lagrange_terms, reconstruct
from sharevote.entities import Share, LagrangeTerm
from sharevote.errors import (
    ReconstructionError, DuplicateCoordinate, ZeroDenominator, NonIntegerResult,
)


def evaluate_poly(coeffs, x):
    y = 0
    for coefficient in reversed(coeffs):
        y = y * x + coefficient
    return y


class LagrangeReconstructionTest(unittest.TestCase):
    def test_quadratic_through_three_points(self):
        shares = [Share(1, 4), Share(2, 7), Share(3, 12)]
        self.assertEqual(reconstruct(shares), 3)

    def test_terms_are_unreduced_fractions(self):
        terms = lagrange_terms([Share(1, 4), Share(2, 7), Share(3, 12)])
        self.assertEqual(terms, [
            LagrangeTerm(24, 2),
            LagrangeTerm(21, -1),
            LagrangeTerm(24, 2),
        ])

    def test_every_subset_recovers_constant_term(self):
        rng = random.Random(1337)
        for k in range(1, 6):
            coeffs = [rng.randint(-10**6, 10**6) for _ in range(k)]
            xs = rng.sample([x for x in range(-25, 26) if x != 0], k + 3)
            shares = [Share(x, evaluate_poly(coeffs, x)) for x in xs]
            for subset in combinations(shares, k):
                self.assertEqual(reconstruct(subset), coeffs[0])

    def test_lower_degree_polynomial(self):
        # y = 10x sampled by a k=3 subset still interpolates to 0
        shares = [Share(10, 100), Share(20, 200), Share(30, 300)]
        self.assertEqual(reconstruct(shares), 0)

    def test_big_coefficients_stay_exact(self):
        coeffs = [2**255 - 19, 3**120, -(7**90), 11**70]
        shares = [Share(x, evaluate_poly(coeffs, x)) for x in (1, 2, 3, 5)]
        self.assertEqual(reconstruct(shares), 2**255 - 19)

    def test_single_share_is_its_own_secret(self):
        self.assertEqual(reconstruct([Share(5, 42)]), 42)

    def test_share_at_origin(self):
        shares = [Share(0, 9), Share(1, 11), Share(2, 13)]
        self.assertEqual(reconstruct(shares), 9)

    def test_duplicate_coordinate(self):
        with self.assertRaises(DuplicateCoordinate) as ctx:
            reconstruct([Share(1, 4), Share(1, 5), Share(3, 12)])
        self.assertEqual(ctx.exception.x, 1)

    def test_points_off_integer_polynomial(self):
        with self.assertRaises(NonIntegerResult) as ctx:
            reconstruct([Share(1, 1), Share(3, 2)])
        self.assertEqual((ctx.exception.numerator, ctx.exception.denominator), (1, 2))

    def test_corrupted_share_breaks_integrality(self):
        # y = x^2 + 3 with the share at x=6 off by one
        with self.assertRaises(NonIntegerResult):
            reconstruct([Share(1, 4), Share(2, 7), Share(6, 40)])

    def test_zero_common_denominator(self):
        with mock.patch("sharevote.crypto.lcm", return_value=0):
            with self.assertRaises(ZeroDenominator):
                reconstruct([Share(1, 4), Share(2, 7)])

    def test_no_shares(self):
        with self.assertRaises(ReconstructionError):
            reconstruct([])

    def test_lcm(self):
        self.assertEqual(lcm(4, 6), 12)
        self.assertEqual(lcm(-4, 6), 12)
        self.assertEqual(lcm(0, 5), 0)
        self.assertEqual(lcm(1, -1), 1)


if __name__ == '__main__':
    unittest.main()
