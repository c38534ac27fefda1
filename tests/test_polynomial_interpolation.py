from __future__ import annotations

import numpy as np
import numpy.polynomial.polynomial as npP
import pytest

from ncquad.errors import InterpolationError
from ncquad.formatting import format_polynomial
from ncquad.polynomial import (
    add_polynomials,
    evaluate_polynomial,
    interpolate,
    multiply_polynomials,
    polynomial_degree,
    scale_polynomial,
    sum_polynomials,
    to_coefficient_array,
)
from ncquad.samples import validate_samples


def test_add_treats_missing_exponents_as_zero() -> None:
    out = add_polynomials({0: 1, 2: 3}, {1: 4, 2: -3})
    assert out == {0: 1.0, 1: 4.0, 2: 0.0}
    assert polynomial_degree(out) == 1


def test_multiply_is_convolution_of_exponent_maps() -> None:
    out = multiply_polynomials({0: 1, 1: 1}, {0: -1, 1: 1})
    assert out == {0: -1.0, 1: 0.0, 2: 1.0}
    assert format_polynomial(out) == "x^2 - 1"


def test_scale_and_sum() -> None:
    assert scale_polynomial({1: 2, 3: -1}, 0.5) == {1: 1.0, 3: -0.5}
    assert sum_polynomials([{0: 1}, {1: 2}, {0: -1, 2: 4}]) == {0: 0.0, 1: 2.0, 2: 4.0}
    assert sum_polynomials([]) == {}


def test_degree_of_zero_polynomial() -> None:
    assert polynomial_degree({}) == -1
    assert polynomial_degree({3: 0.0}) == -1


def test_coefficient_array_matches_numpy_convention() -> None:
    coeffs = to_coefficient_array({2: 1.0, 0: -4.0})
    assert coeffs.tolist() == [-4.0, 0.0, 1.0]
    assert npP.polyval(3.0, coeffs) == 5.0
    assert evaluate_polynomial({2: 1.0, 0: -4.0}, 3.0) == 5.0
    np.testing.assert_allclose(evaluate_polynomial({1: 2.0}, np.array([0.0, 1.0, 2.0])), [0.0, 2.0, 4.0])


def test_squares_interpolate_to_x_squared() -> None:
    samples = validate_samples([(0, 0), (1, 1), (2, 4), (3, 9)])
    poly = interpolate(samples)
    for exp, expected in {0: 0.0, 1: 0.0, 2: 1.0, 3: 0.0}.items():
        assert poly.get(exp, 0.0) == pytest.approx(expected, abs=1e-12)
    assert polynomial_degree(poly) == 2
    assert format_polynomial(poly) == "x^2"


def test_two_points_give_a_line() -> None:
    poly = interpolate(validate_samples([(0, 1), (2, 5)]))
    assert poly == {0: 1.0, 1: 2.0}
    assert format_polynomial(poly) == "2x + 1"


def test_interpolant_reproduces_every_sample() -> None:
    rng = np.random.default_rng(7)
    xs = np.linspace(-2.0, 2.0, 7) + rng.uniform(-0.1, 0.1, size=7)
    assert len(set(xs.tolist())) == xs.size
    fxs = rng.normal(size=xs.size)
    samples = validate_samples(list(zip(xs.tolist(), fxs.tolist())))

    poly = interpolate(samples)
    assert polynomial_degree(poly) <= samples.n - 1
    np.testing.assert_allclose(evaluate_polynomial(poly, samples.xs), samples.fxs, rtol=1e-6, atol=1e-8)


def test_unordered_samples_interpolate_the_same_polynomial() -> None:
    forward = interpolate(validate_samples([(-1, 2), (0, 1), (1, 2)]))
    shuffled = interpolate(validate_samples([(1, 2), (-1, 2), (0, 1)]))
    np.testing.assert_allclose(to_coefficient_array(forward), to_coefficient_array(shuffled), atol=1e-12)
    np.testing.assert_allclose(to_coefficient_array(forward), [1.0, 0.0, 1.0], atol=1e-12)


def test_duplicate_x_is_an_interpolation_error() -> None:
    samples = validate_samples([(0, 0), (1, 1), (1, 2)])
    with pytest.raises(InterpolationError) as exc_info:
        interpolate(samples)
    assert exc_info.value.kind == "interpolation"
    assert "duplicate x value" in exc_info.value.message


def test_non_finite_coefficients_are_an_interpolation_error() -> None:
    samples = validate_samples([(0.0, 1e308), (1e-300, -1e308)])
    with pytest.raises(InterpolationError):
        interpolate(samples)
