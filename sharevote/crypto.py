from math import gcd

from sharevote.entities import LagrangeTerm
from sharevote.errors import (
    ReconstructionError, DuplicateCoordinate, ZeroDenominator, NonIntegerResult,
)


def lcm(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def lagrange_terms(shares):
    """
    Lagrange basis at x=0 for each point, scaled by its y, as exact fractions:
    numerator = y_i * prod(-x_j), denominator = prod(x_i - x_j) over j != i.
    """
    terms = []
    for i, (xi, yi) in enumerate(shares):
        numerator = 1
        denominator = 1
        for j, (xj, _) in enumerate(shares):
            if j == i:
                continue
            if xi == xj:
                raise DuplicateCoordinate(xi)
            numerator *= -xj
            denominator *= xi - xj
        terms.append(LagrangeTerm(yi * numerator, denominator))
    return terms


def reconstruct(shares) -> int:
    """
    Recover the constant term of the polynomial through `shares` using exact
    rational arithmetic. The terms are summed over the LCM of their
    denominators; the total must divide evenly or the points do not lie on a
    single integer-secret polynomial.
    """
    if not shares:
        raise ReconstructionError("Cannot reconstruct secret from zero shares.")
    terms = lagrange_terms(shares)

    common_denominator = 1
    for term in terms:
        common_denominator = lcm(common_denominator, term.denominator)
    if common_denominator == 0:
        raise ZeroDenominator()

    total = 0
    for term in terms:
        total += term.numerator * (common_denominator // term.denominator)

    if total % common_denominator != 0:
        raise NonIntegerResult(total, common_denominator)
    return total // common_denominator
