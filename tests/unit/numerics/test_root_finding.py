"""Tests for the monotone bisection solver."""

from __future__ import annotations

import logging

import pytest

from thermoconv.numerics import bisect_monotone, bisection_iterations


def test_bisection_finds_root_of_monotone_function() -> None:
    root = bisect_monotone(27.0, 0.0, 10.0, lambda x: x**3, tolerance=1e-6)

    assert root == pytest.approx(3.0, abs=1e-6)


def test_default_tolerance_bounds_error_to_half_interval() -> None:
    root = bisect_monotone(42.0, -200.0, 850.0, lambda x: 2.0 * x)

    assert abs(root - 21.0) <= 0.005


def test_target_outside_image_converges_to_nearest_bound() -> None:
    root = bisect_monotone(1e6, 0.0, 1.0, lambda x: x, tolerance=1e-3)

    assert root == pytest.approx(1.0, abs=1e-3)


def test_iteration_count_matches_log2_bound(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="thermoconv.numerics.root_finding"):
        bisect_monotone(5.0, 0.0, 16.0, lambda x: x, tolerance=0.0625)

    records = [r for r in caplog.records if r.name == "thermoconv.numerics.root_finding"]
    assert records
    assert records[-1].iterations == 8
    assert bisection_iterations(0.0, 16.0, 0.0625) == 8


def test_iterations_zero_when_bracket_already_narrow() -> None:
    assert bisection_iterations(0.0, 0.005, 0.01) == 0


@pytest.mark.parametrize(
    ("low", "high", "tolerance", "message"),
    [
        (0.0, 1.0, 0.0, "tolerance must be > 0"),
        (1.0, 1.0, 0.01, "low must be < high"),
        (2.0, 1.0, 0.01, "low must be < high"),
    ],
)
def test_bisection_validates_bracket(low: float, high: float, tolerance: float, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        bisect_monotone(0.5, low, high, lambda x: x, tolerance=tolerance)
