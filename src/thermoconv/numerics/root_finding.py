"""Bisection solver for monotone calibration curves."""

from __future__ import annotations

import logging
from math import ceil, log2
from typing import Callable

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 0.01


def bisection_iterations(low: float, high: float, tolerance: float = DEFAULT_TOLERANCE) -> int:
    """Number of halvings needed to shrink `[low, high]` below `tolerance`."""
    _validate_bracket(low, high, tolerance)
    width = high - low
    if width <= tolerance:
        return 0
    return ceil(log2(width / tolerance))


def bisect_monotone(
    target: float,
    low: float,
    high: float,
    func: Callable[[float], float],
    tolerance: float = DEFAULT_TOLERANCE,
) -> float:
    """Approximate `x` in `[low, high]` with `func(x) == target`.

    `func` must be non-decreasing on the bracket and `func(low) <= target <=
    func(high)`; a target outside that image converges to the nearer bound
    with no error. The returned midpoint is within `tolerance / 2` of the root.
    """
    _validate_bracket(low, high, tolerance)

    iterations = 0
    while high - low > tolerance:
        mid = (low + high) / 2.0
        if func(mid) > target:
            high = mid
        else:
            low = mid
        iterations += 1

    root = (low + high) / 2.0
    logger.debug(
        "bisection converged",
        extra={"value": target, "iterations": iterations},
    )
    return root


def _validate_bracket(low: float, high: float, tolerance: float) -> None:
    if tolerance <= 0:
        raise ValueError("tolerance must be > 0")
    if low >= high:
        raise ValueError("low must be < high")
