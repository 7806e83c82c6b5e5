"""Numerical building blocks: piecewise polynomials and bisection."""

from thermoconv.numerics.polynomials import (
    ExponentialTerm,
    PiecewisePolynomial,
    SensorCurve,
    find_segment,
    validate_curve,
)
from thermoconv.numerics.root_finding import DEFAULT_TOLERANCE, bisect_monotone, bisection_iterations

__all__ = [
    "DEFAULT_TOLERANCE",
    "ExponentialTerm",
    "PiecewisePolynomial",
    "SensorCurve",
    "bisect_monotone",
    "bisection_iterations",
    "find_segment",
    "validate_curve",
]
