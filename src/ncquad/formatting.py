from __future__ import annotations

import math
from typing import Mapping

_INTEGRAL_DISPLAY_LIMIT = 1e21


def format_number(value: float) -> str:
    """Shortest round-trip text; integral values are shown without a fraction (5, not 5.0)."""
    v = float(value)
    if math.isfinite(v) and v.is_integer() and abs(v) < _INTEGRAL_DISPLAY_LIMIT:
        return str(int(v))
    return repr(v)


def _variable_suffix(exp: int) -> str:
    if exp == 0:
        return ""
    if exp == 1:
        return "x"
    return f"x^{exp}"


def format_term(exp: int, coef: float) -> str:
    sign = " + " if coef > 0 else " - "
    magnitude = abs(float(coef))
    coef_text = "" if (magnitude == 1.0 and exp != 0) else format_number(magnitude)
    return f"{sign}{coef_text}{_variable_suffix(exp)}"


def format_polynomial(poly: Mapping[int, float]) -> str:
    """Render highest exponent first, e.g. {1: -3, 0: 2} -> "-3x + 2".

    Zero coefficients are dropped; the zero polynomial renders as "".
    """
    terms = [
        format_term(int(exp), float(coef))
        for exp, coef in sorted(poly.items(), key=lambda kv: int(kv[0]), reverse=True)
        if float(coef) != 0.0
    ]
    text = "".join(terms)
    if text.startswith(" + "):
        return text[3:]
    if text.startswith(" - "):
        return "-" + text[3:]
    return text
