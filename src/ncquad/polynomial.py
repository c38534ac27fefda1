"""Sparse polynomial algebra and Lagrange interpolation.

A polynomial is a plain ``dict[int, float]`` mapping a non-negative exponent
to its coefficient. Absent exponents are zero. Exponents whose coefficient
cancels to zero are kept in the mapping; formatting drops them.
"""
from __future__ import annotations

import math
from functools import reduce
from typing import Dict, Iterable, Mapping

import numpy as np
import numpy.polynomial.polynomial as npP

from ncquad.errors import InterpolationError
from ncquad.logging_setup import get_logger
from ncquad.samples import SampleSet

Polynomial = Dict[int, float]

logger = get_logger(__name__)


def add_polynomials(p: Mapping[int, float], q: Mapping[int, float]) -> Polynomial:
    out: Polynomial = {int(e): float(c) for e, c in p.items()}
    for exp, coef in q.items():
        exp = int(exp)
        out[exp] = out.get(exp, 0.0) + float(coef)
    return out


def multiply_polynomials(p: Mapping[int, float], q: Mapping[int, float]) -> Polynomial:
    out: Polynomial = {}
    for e1, c1 in p.items():
        for e2, c2 in q.items():
            exp = int(e1) + int(e2)
            out[exp] = out.get(exp, 0.0) + float(c1) * float(c2)
    return out


def scale_polynomial(p: Mapping[int, float], factor: float) -> Polynomial:
    return multiply_polynomials(p, {0: float(factor)})


def sum_polynomials(terms: Iterable[Mapping[int, float]]) -> Polynomial:
    return reduce(add_polynomials, terms, {})


def polynomial_degree(p: Mapping[int, float]) -> int:
    """Highest exponent with a nonzero coefficient; -1 for the zero polynomial."""
    return max((int(e) for e, c in p.items() if c != 0), default=-1)


def to_coefficient_array(p: Mapping[int, float]) -> np.ndarray:
    """Dense coefficients in ascending order, as used by numpy.polynomial.polynomial."""
    if not p:
        return np.zeros(1, dtype=float)
    coeffs = np.zeros(max(int(e) for e in p) + 1, dtype=float)
    for exp, coef in p.items():
        coeffs[int(exp)] += float(coef)
    return coeffs


def evaluate_polynomial(p: Mapping[int, float], x):
    values = npP.polyval(np.asarray(x, dtype=float), to_coefficient_array(p))
    if np.ndim(values) == 0:
        return float(values)
    return values


def _linear_factor(xi: float, xj: float) -> Polynomial:
    # (x - xj) / (xi - xj)
    denom = xi - xj
    return {0: -xj / denom, 1: 1.0 / denom}


def _basis_term(samples: SampleSet, i: int) -> Polynomial:
    xi = samples[i].x
    term: Polynomial = {0: samples[i].fx}
    for j, other in enumerate(samples):
        if j == i:
            continue
        term = multiply_polynomials(term, _linear_factor(xi, other.x))
    return term


def interpolate(samples: SampleSet) -> Polynomial:
    """Lagrange polynomial of degree <= n-1 through every sample.

    Raises InterpolationError for repeated x values or non-finite coefficients.
    """
    if not samples.has_distinct_x():
        raise InterpolationError("Interpolation error: duplicate x values; x values must be distinct.")

    try:
        result = sum_polynomials(_basis_term(samples, i) for i in range(samples.n))
    except (ArithmeticError, ValueError) as exc:
        raise InterpolationError(f"Interpolation error: {exc}") from exc

    if not all(math.isfinite(c) for c in result.values()):
        raise InterpolationError("Interpolation error: polynomial has non-finite coefficients.")
    logger.debug("interpolated", n=samples.n, degree=polynomial_degree(result))
    return result
