from __future__ import annotations

import math
from typing import Callable, Mapping

from ncquad.errors import MSG_CALCULATION_FAULT, MSG_NAN_RESULT, ComputationError, UnsupportedRuleError
from ncquad.logging_setup import get_logger
from ncquad.quadrature.types import QuadratureRule, RuleName
from ncquad.samples import SampleSet, make_point_evaluator

logger = get_logger(__name__)


def adjusted_point_count(n: int, panel: int) -> int:
    """Point count a rule actually uses.

    Simpson 1/3 drops an even n by one. Wider panels round n down to
    floor(n / panel) * panel + 1 unless n is already a multiple of the panel,
    in which case n is kept as is.
    """
    n = int(n)
    panel = int(panel)
    if panel <= 1:
        return n
    if panel == 2:
        return n - 1 if n % 2 == 0 else n
    if n % panel != 0:
        return n // panel * panel + 1
    return n


def _step(a: float, b: float, n: int) -> float:
    if n < 2:
        raise ZeroDivisionError(f"step divisor is zero (point count {n} after adjustment)")
    return (b - a) / (n - 1)


def trapezoidal_rule(f: Callable[[float], float], a: float, b: float, n: int) -> float:
    h = _step(a, b, n)
    total = 0.5 * (f(a) + f(b))
    for i in range(1, n - 1):
        total += f(a + i * h)
    return total * h


def simpson13_rule(f: Callable[[float], float], a: float, b: float, n: int) -> float:
    n = adjusted_point_count(n, 2)
    h = _step(a, b, n)
    total = f(a) + f(b)
    for i in range(1, n - 1, 2):
        total += 4 * f(a + i * h)
    for i in range(2, n - 1, 2):
        total += 2 * f(a + i * h)
    return (h / 3) * total


def simpson38_rule(f: Callable[[float], float], a: float, b: float, n: int) -> float:
    n = adjusted_point_count(n, 3)
    h = _step(a, b, n)
    total = f(a) + f(b)
    for i in range(1, n - 1):
        weight = 2 if i % 3 == 0 else 3
        total += weight * f(a + i * h)
    return (3 * h / 8) * total


def weddle_rule(f: Callable[[float], float], a: float, b: float, n: int) -> float:
    n = adjusted_point_count(n, 6)
    h = _step(a, b, n)
    total = f(a) + f(b)
    for i in range(1, n - 1):
        r = i % 6
        if r in (1, 5):
            weight = 5
        elif r in (2, 4):
            weight = 1
        else:
            weight = 6
        total += weight * f(a + i * h)
    return (3 * h / 10) * total


def boole_rule(f: Callable[[float], float], a: float, b: float, n: int) -> float:
    n = adjusted_point_count(n, 4)
    h = _step(a, b, n)
    total = 7 * (f(a) + f(b))
    for i in range(1, n - 1):
        if i % 4 == 0:
            weight = 14
        elif i % 2 == 0:
            weight = 12
        else:
            weight = 32
        total += weight * f(a + i * h)
    return (2 * h / 45) * total


RULES: Mapping[str, QuadratureRule] = {
    "trapezoidal": QuadratureRule(name="trapezoidal", label="Trapezoidal rule", panel=1, func=trapezoidal_rule),
    "simpson13": QuadratureRule(name="simpson13", label="Simpson's 1/3 rule", panel=2, func=simpson13_rule),
    "simpson38": QuadratureRule(name="simpson38", label="Simpson's 3/8 rule", panel=3, func=simpson38_rule),
    "weddle": QuadratureRule(name="weddle", label="Weddle's rule", panel=6, func=weddle_rule),
    "boole": QuadratureRule(name="boole", label="Boole's rule", panel=4, func=boole_rule),
}


def get_rule(rule: RuleName | str) -> QuadratureRule:
    if not isinstance(rule, str) or rule not in RULES:
        raise UnsupportedRuleError(rule)
    return RULES[rule]


def integrate(samples: SampleSet, rule: RuleName | str) -> float:
    """Approximate the integral from samples[0].x to samples[-1].x with the named rule.

    Grid points are looked up by exact x match; a miss yields nan, which is
    reported as ComputationError. Arithmetic faults inside the rule are
    reported as ComputationError too.
    """
    quad = get_rule(rule)
    f = make_point_evaluator(samples)
    n = samples.n
    logger.debug(
        "integrate",
        rule=quad.name,
        label=quad.label,
        n=n,
        n_used=adjusted_point_count(n, quad.panel),
        a=samples.a,
        b=samples.b,
    )
    try:
        result = float(quad.func(f, samples.a, samples.b, n))
    except (ArithmeticError, ValueError) as exc:
        raise ComputationError(MSG_CALCULATION_FAULT + str(exc)) from exc
    if math.isnan(result) or math.isinf(result):
        raise ComputationError(MSG_NAN_RESULT)
    return result
