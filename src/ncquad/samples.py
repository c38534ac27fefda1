from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Real
from typing import Callable, Iterable

import numpy as np

from ncquad.errors import MSG_INVALID_NUMBER, MSG_TOO_FEW_POINTS, ValidationError
from ncquad.logging_setup import get_logger

MIN_POINTS = 2

logger = get_logger(__name__)

PointEvaluator = Callable[[float], float]


@dataclass(frozen=True, slots=True)
class Sample:
    x: float
    fx: float


@dataclass(frozen=True, slots=True)
class SampleSet:
    """Ordered (x, f(x)) samples. Order is significant: a and b are the first and last x."""

    samples: tuple[Sample, ...]

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self):
        return iter(self.samples)

    def __getitem__(self, idx: int) -> Sample:
        return self.samples[idx]

    @property
    def n(self) -> int:
        return len(self.samples)

    @property
    def a(self) -> float:
        return self.samples[0].x

    @property
    def b(self) -> float:
        return self.samples[-1].x

    @property
    def xs(self) -> np.ndarray:
        return np.array([s.x for s in self.samples], dtype=float)

    @property
    def fxs(self) -> np.ndarray:
        return np.array([s.fx for s in self.samples], dtype=float)

    def has_distinct_x(self) -> bool:
        return len({s.x for s in self.samples}) == len(self.samples)


def _parse_value(raw: object) -> float:
    if isinstance(raw, bool):
        raise ValidationError(MSG_INVALID_NUMBER)
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            raise ValidationError(MSG_INVALID_NUMBER)
        try:
            value = float(text)
        except ValueError as exc:
            raise ValidationError(MSG_INVALID_NUMBER) from exc
    elif isinstance(raw, (Real, np.floating, np.integer)):
        try:
            value = float(raw)
        except OverflowError as exc:
            raise ValidationError(MSG_INVALID_NUMBER) from exc
    else:
        raise ValidationError(MSG_INVALID_NUMBER)
    if not math.isfinite(value):
        raise ValidationError(MSG_INVALID_NUMBER)
    return value


def _split_pair(raw_pair: object) -> tuple[object, object]:
    if isinstance(raw_pair, (str, bytes)) or not isinstance(raw_pair, (Sequence, np.ndarray)):
        raise ValidationError(MSG_INVALID_NUMBER)
    if len(raw_pair) != 2:
        raise ValidationError(MSG_INVALID_NUMBER)
    return raw_pair[0], raw_pair[1]


def validate_samples(raw_pairs: Iterable[object]) -> SampleSet:
    """Build a SampleSet from raw (x, fx) candidates.

    Values may be numbers or numeric text. The point count is checked before
    any value is parsed. Duplicate or unordered x values are passed through.
    """
    pairs = list(raw_pairs)
    if len(pairs) < MIN_POINTS:
        raise ValidationError(MSG_TOO_FEW_POINTS)

    samples: list[Sample] = []
    for raw_pair in pairs:
        raw_x, raw_fx = _split_pair(raw_pair)
        samples.append(Sample(x=_parse_value(raw_x), fx=_parse_value(raw_fx)))
    logger.debug("samples_validated", n=len(samples))
    return SampleSet(samples=tuple(samples))


def make_point_evaluator(samples: SampleSet) -> PointEvaluator:
    """Exact-match lookup of f(x); nan when no sample has exactly this x.

    The first matching sample wins. Quadrature grid points only hit when the
    samples are evenly spaced with the step the selected rule derives.
    """
    table = [(s.x, s.fx) for s in samples]

    def f(x: float) -> float:
        for xv, fxv in table:
            if xv == x:
                return fxv
        return float("nan")

    return f
