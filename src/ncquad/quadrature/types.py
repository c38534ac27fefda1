from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal

RuleName = Literal["trapezoidal", "simpson13", "simpson38", "weddle", "boole"]

RULE_NAMES: tuple[str, ...] = ("trapezoidal", "simpson13", "simpson38", "weddle", "boole")

RuleFunction = Callable[[Callable[[float], float], float, float, int], float]


@dataclass(frozen=True, slots=True)
class QuadratureRule:
    name: str
    label: str
    panel: int
    func: RuleFunction
