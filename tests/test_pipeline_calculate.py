from __future__ import annotations

import json

import pytest

from ncquad.errors import MSG_INVALID_NUMBER, MSG_INVALID_RULE, MSG_NAN_RESULT, MSG_TOO_FEW_POINTS
from ncquad.pipeline import RESULT_SCHEMA, calculate

SQUARES = [(0, 0), (1, 1), (2, 4), (3, 9)]


def test_squares_with_trapezoidal_rule() -> None:
    res = calculate(SQUARES, "trapezoidal")
    assert res.ok
    assert res.integral == 9.5
    assert res.polynomial_text == "x^2"
    assert res.n_points == 4
    assert res.messages() == ["Approximate integral: 9.5", "Polynomial: x^2"]


def test_text_input_like_form_fields() -> None:
    res = calculate([("0", "1"), (" 0.5 ", "1.25"), ("1", "2")], "simpson13")
    assert res.ok
    assert res.integral == pytest.approx(4.0 / 3.0)
    assert res.polynomial_text == "x^2 + 1"


@pytest.mark.parametrize(
    ("pairs", "rule", "kind", "message"),
    [
        ([("1", "2")], "trapezoidal", "validation", MSG_TOO_FEW_POINTS),
        ([("1", "2")], "no-such-rule", "validation", MSG_TOO_FEW_POINTS),
        ([("a", "1"), ("2", "3")], "trapezoidal", "validation", MSG_INVALID_NUMBER),
        ([("1", "1"), ("2", "")], "trapezoidal", "validation", MSG_INVALID_NUMBER),
        (SQUARES, "midpoint", "unsupported_rule", MSG_INVALID_RULE),
        (SQUARES, "simpson13", "computation", MSG_NAN_RESULT),
    ],
)
def test_failures_come_back_as_tagged_results(pairs, rule, kind, message) -> None:
    res = calculate(pairs, rule)
    assert not res.ok
    assert res.error_kind == kind
    assert res.error_message == message
    assert res.messages() == [message]
    assert res.polynomial == {}
    assert res.polynomial_text == ""


def test_duplicate_x_keeps_integral_but_fails_interpolation() -> None:
    res = calculate([(0, 0), (2, 4), (2, 5), (4, 16)], "simpson13")
    assert not res.ok
    assert res.error_kind == "interpolation"
    assert res.integral == pytest.approx(64.0 / 3.0)


def test_payload_is_json_serialisable() -> None:
    payload = calculate(SQUARES, "trapezoidal").to_payload()
    text = json.dumps(payload, sort_keys=True)
    back = json.loads(text)
    assert back["schema"] == RESULT_SCHEMA
    assert back["ok"] is True
    assert back["integral"] == 9.5
    assert back["polynomial_text"] == "x^2"
    assert back["polynomial"]["2"] == pytest.approx(1.0)
    assert back["error_kind"] is None


def test_calls_do_not_share_state() -> None:
    first = calculate(SQUARES, "trapezoidal")
    second = calculate([(0, 1), (2, 5)], "trapezoidal")
    assert first.polynomial_text == "x^2"
    assert second.polynomial_text == "2x + 1"
    assert second.integral == 6.0


@pytest.mark.parametrize(
    ("rule", "n", "expected"),
    [
        ("simpson38", 6, 39.75),
        ("boole", 4, 143.0 * 2.0 / 45.0),
        ("boole", 8, 2167.0 * 2.0 / 45.0),
        ("weddle", 6, 31.2),
        ("weddle", 12, 430.8),
    ],
)
def test_point_count_that_is_a_multiple_of_the_panel_uses_every_sample(rule: str, n: int, expected: float) -> None:
    res = calculate([(x, x * x) for x in range(n)], rule)
    assert res.ok
    assert res.n_points == n
    assert res.integral == pytest.approx(expected, rel=1e-12)
