from __future__ import annotations

import math

import pytest

from calcpad.accumulator import evaluate, render
from calcpad.formatting import display_text, format_result, round10, to_exponential, to_plain
from calcpad.models import Operator
from helpers import press


def test_round10_suppresses_binary_noise() -> None:
    assert round10(0.1 + 0.2) == 0.3
    assert round10(1 / 3) == 0.3333333333
    assert round10(2 / 3) == 0.6666666667


def test_round10_never_returns_negative_zero() -> None:
    assert math.copysign(1.0, round10(-1e-12)) == 1.0
    assert math.copysign(1.0, round10(-0.0)) == 1.0


def test_round10_leaves_unscalable_values_alone() -> None:
    assert round10(1e300) == 1e300


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.0, "0"),
        (12.0, "12"),
        (-2.0, "-2"),
        (0.3, "0.3"),
        (-0.5, "-0.5"),
        (1.25, "1.25"),
        (123456000.0, "123456000"),
        (123456789012.5, "123456789012.5"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (1.5e-8, "1.5e-8"),
        (1e21, "1e+21"),
    ],
)
def test_to_plain(value: float, expected: str) -> None:
    assert to_plain(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1e13, "1.000000e+13"),
        (5e-10, "5.000000e-10"),
        (123456.0, "1.234560e+5"),
        (-1234567890123.0, "-1.234568e+12"),
        (float("inf"), "Infinity"),
    ],
)
def test_to_exponential_uses_six_fraction_digits(value: float, expected: str) -> None:
    assert to_exponential(value) == expected


def test_format_result_thresholds() -> None:
    assert format_result(999_999_999_999.0) == "999999999999"
    assert format_result(1_000_000_000_000.0) == "1.000000e+12"
    assert format_result(-1e13) == "-1.000000e+13"
    assert format_result(1e-9) == "1e-9"
    assert format_result(5e-10) == "5.000000e-10"
    assert format_result(0.0) == "0"


def test_display_text_only_shortens_long_values() -> None:
    assert display_text("0.1234567890") == "0.1234567890"
    assert display_text("123456789012") == "123456789012"
    assert display_text("12345678901234") == "1.234568e+13"
    # Exponential results are exactly 12 characters and pass through untouched.
    assert display_text("1.000000e+13") == "1.000000e+13"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1234566500000.0, "1.234567e+12"),
        (-1234566500000.0, "-1.234567e+12"),
        (9999999.5, "1.000000e+7"),
        (2.5e-10, "2.500000e-10"),
        (0.0, "0.000000e+0"),
    ],
)
def test_to_exponential_rounds_ties_away_from_zero(value: float, expected: str) -> None:
    assert to_exponential(value) == expected


def test_halfway_results_round_up_in_display_and_evaluation() -> None:
    assert render(press(*"1234566500000")) == "1.234567e+12"
    assert evaluate("1234566500000", Operator.add, "0") == "1.234567e+12"
