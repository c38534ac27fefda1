from __future__ import annotations

from ncquad.errors import (
    ComputationError,
    InterpolationError,
    NcquadError,
    UnsupportedRuleError,
    ValidationError,
)
from ncquad.formatting import format_number, format_polynomial
from ncquad.pipeline import CalculationResult, calculate
from ncquad.polynomial import (
    add_polynomials,
    evaluate_polynomial,
    interpolate,
    multiply_polynomials,
    polynomial_degree,
)
from ncquad.quadrature import RULE_NAMES, integrate
from ncquad.samples import Sample, SampleSet, make_point_evaluator, validate_samples

__all__ = [
    "CalculationResult",
    "ComputationError",
    "InterpolationError",
    "NcquadError",
    "RULE_NAMES",
    "Sample",
    "SampleSet",
    "UnsupportedRuleError",
    "ValidationError",
    "add_polynomials",
    "calculate",
    "evaluate_polynomial",
    "format_number",
    "format_polynomial",
    "integrate",
    "interpolate",
    "make_point_evaluator",
    "multiply_polynomials",
    "polynomial_degree",
    "validate_samples",
]
