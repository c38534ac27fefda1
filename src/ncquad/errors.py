from __future__ import annotations

from typing import Literal

ErrorKind = Literal["validation", "unsupported_rule", "computation", "interpolation"]

MSG_TOO_FEW_POINTS = "Please add at least two points (x, f(x)) for integration."
MSG_INVALID_NUMBER = "Invalid input: please enter numeric values for x and f(x)."
MSG_INVALID_RULE = "Invalid rule selected."
MSG_NAN_RESULT = "Calculation error: please check your input values and try again."
MSG_CALCULATION_FAULT = "Error in calculation: "


class NcquadError(ValueError):
    """Base class for errors reported back to the caller as a message."""

    kind: ErrorKind = "computation"

    def __init__(self, message: str) -> None:
        self.message = str(message)
        super().__init__(self.message)


class ValidationError(NcquadError):
    kind: ErrorKind = "validation"


class UnsupportedRuleError(NcquadError):
    kind: ErrorKind = "unsupported_rule"

    def __init__(self, rule: object) -> None:
        self.rule = rule
        super().__init__(MSG_INVALID_RULE)


class ComputationError(NcquadError):
    kind: ErrorKind = "computation"


class InterpolationError(NcquadError):
    kind: ErrorKind = "interpolation"


class ConfigError(ValueError):
    """Raised when a config file is readable but malformed."""
