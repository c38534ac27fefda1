from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from ncquad.errors import ErrorKind, NcquadError
from ncquad.formatting import format_number, format_polynomial
from ncquad.logging_setup import get_logger
from ncquad.polynomial import Polynomial, interpolate
from ncquad.quadrature.rules import integrate
from ncquad.quadrature.types import RuleName
from ncquad.samples import validate_samples

RESULT_SCHEMA = "ncquad_result.v1"

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CalculationResult:
    ok: bool
    rule: str
    n_points: int = 0
    integral: float | None = None
    polynomial: Polynomial = field(default_factory=dict)
    polynomial_text: str = ""
    error_kind: ErrorKind | None = None
    error_message: str = ""

    def messages(self) -> List[str]:
        if not self.ok:
            return [self.error_message]
        return [
            f"Approximate integral: {format_number(float(self.integral or 0.0))}",
            f"Polynomial: {self.polynomial_text}",
        ]

    def to_payload(self) -> Dict[str, Any]:
        return {
            "schema": RESULT_SCHEMA,
            "ok": bool(self.ok),
            "rule": str(self.rule),
            "n_points": int(self.n_points),
            "integral": self.integral,
            "polynomial": {str(e): float(c) for e, c in sorted(self.polynomial.items())},
            "polynomial_text": self.polynomial_text,
            "error_kind": self.error_kind,
            "error_message": self.error_message,
        }


def _failed(
    rule: object,
    exc: NcquadError,
    *,
    n_points: int = 0,
    integral: float | None = None,
) -> CalculationResult:
    logger.warning("calculation_failed", rule=str(rule), kind=exc.kind, error=exc.message)
    return CalculationResult(
        ok=False,
        rule=str(rule),
        n_points=int(n_points),
        integral=integral,
        error_kind=exc.kind,
        error_message=exc.message,
    )


def calculate(raw_pairs: Iterable[object], rule: RuleName | str) -> CalculationResult:
    """Validate, integrate, then interpolate; errors come back inside the result.

    The polynomial is only built once the integral succeeded.
    """
    try:
        samples = validate_samples(raw_pairs)
    except NcquadError as exc:
        return _failed(rule, exc)

    try:
        integral = integrate(samples, rule)
    except NcquadError as exc:
        return _failed(rule, exc, n_points=samples.n)

    try:
        poly = interpolate(samples)
    except NcquadError as exc:
        return _failed(rule, exc, n_points=samples.n, integral=integral)

    text = format_polynomial(poly)
    logger.info("calculation_done", rule=rule, n=samples.n, integral=integral, polynomial=text)
    return CalculationResult(
        ok=True,
        rule=str(rule),
        n_points=samples.n,
        integral=integral,
        polynomial=poly,
        polynomial_text=text,
    )
