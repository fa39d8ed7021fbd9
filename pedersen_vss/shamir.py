from .ecc import Scalar
from .utils import DuplicateIndex


def eval_poly(poly: list[Scalar], x: int) -> Scalar:
    """Evaluate polynomial at x with Horner's method. poly is [a_0, a_1, ..., a_d]."""
    if not poly:
        raise ValueError("Polynomial has no coefficients")
    prime = poly[0].prime
    x = Scalar(x, prime)
    result = poly[-1]
    for coeff in reversed(poly[:-1]):
        result = result * x + coeff
    return result


def random_poly(constant: Scalar, t: int, group, rng=None) -> list[Scalar]:
    """Polynomial of degree t-1 with the given constant term and random higher coefficients."""
    return [constant] + [group.random(rng) for _ in range(t - 1)]


def check_distinct(x_s):
    seen = set()
    for x in x_s:
        if x in seen:
            raise DuplicateIndex(x)
        seen.add(x)


def lagrange_coeffs(x_s: list[int], prime: int) -> list[Scalar]:
    """Lagrange basis values at 0: lambda_i = prod_{j != i} (-x_j) / (x_i - x_j)."""
    check_distinct(x_s)
    coeffs = []
    for i, xi in enumerate(x_s):
        num = Scalar(1, prime)
        den = Scalar(1, prime)
        for j, xj in enumerate(x_s):
            if i == j:
                continue
            num = num * Scalar(-xj, prime)
            den = den * Scalar(xi - xj, prime)
        coeffs.append(num * den.inv())
    return coeffs


def interpolate_at_zero(points: list[tuple[int, Scalar]]) -> Scalar:
    """Recover f(0) from (x, f(x)) points."""
    if not points:
        raise ValueError("Need at least one point to interpolate")
    x_s, y_s = zip(*points)
    prime = y_s[0].prime
    total = Scalar(0, prime)
    for yi, li in zip(y_s, lagrange_coeffs(list(x_s), prime)):
        total = total + yi * li
    return total
