import pytest

from pedersen_vss.ecc import Scalar
from pedersen_vss.shamir import eval_poly, interpolate_at_zero, lagrange_coeffs, random_poly
from pedersen_vss.utils import DuplicateIndex

PRIME = 9739


def poly(*coeffs):
    return [Scalar(c, PRIME) for c in coeffs]


def test_eval_poly():
    f = poly(1, 2, 3)
    assert eval_poly(f, 0) == Scalar(1, PRIME)
    assert eval_poly(f, 2) == Scalar(1 + 2 * 2 + 3 * 4, PRIME)
    assert eval_poly(f, 100) == Scalar(1 + 200 + 30000, PRIME)


def test_eval_poly_constant():
    assert eval_poly(poly(42), 7) == Scalar(42, PRIME)


def test_eval_poly_empty():
    with pytest.raises(ValueError):
        eval_poly([], 1)


def test_lagrange_coeffs_sum_to_one():
    # interpolating the constant polynomial 1
    coeffs = lagrange_coeffs([1, 2, 3, 4], PRIME)
    total = Scalar(0, PRIME)
    for c in coeffs:
        total = total + c
    assert total == Scalar(1, PRIME)


def test_lagrange_coeffs_duplicate():
    with pytest.raises(DuplicateIndex) as exc:
        lagrange_coeffs([1, 2, 2], PRIME)
    assert exc.value.index == 2


def test_interpolate_at_zero():
    secret = 1234
    f = poly(secret, 166, 94)
    points = [(x, eval_poly(f, x)) for x in (5, 1, 3)]
    assert interpolate_at_zero(points) == Scalar(secret, PRIME)
    more = [(x, eval_poly(f, x)) for x in range(1, 6)]
    assert interpolate_at_zero(more) == Scalar(secret, PRIME)


def test_interpolate_too_few_points_is_wrong():
    f = poly(1234, 166, 94)
    points = [(x, eval_poly(f, x)) for x in (1, 2)]
    assert interpolate_at_zero(points) != Scalar(1234, PRIME)


def test_interpolate_no_points():
    with pytest.raises(ValueError):
        interpolate_at_zero([])


def test_random_poly(group):
    secret = group.scalar(77)
    f = random_poly(secret, 4, group)
    assert len(f) == 4
    assert f[0] is secret
    assert eval_poly(f, 0) == secret
