from __future__ import annotations

from ncquad.quadrature.rules import (
    RULES,
    adjusted_point_count,
    boole_rule,
    get_rule,
    integrate,
    simpson13_rule,
    simpson38_rule,
    trapezoidal_rule,
    weddle_rule,
)
from ncquad.quadrature.types import RULE_NAMES, QuadratureRule, RuleName

__all__ = [
    "QuadratureRule",
    "RULES",
    "RULE_NAMES",
    "RuleName",
    "adjusted_point_count",
    "boole_rule",
    "get_rule",
    "integrate",
    "simpson13_rule",
    "simpson38_rule",
    "trapezoidal_rule",
    "weddle_rule",
]
