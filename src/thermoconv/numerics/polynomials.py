"""Piecewise polynomial calibration curves."""

from __future__ import annotations

from dataclasses import dataclass
from math import exp, isfinite
from typing import Sequence

from numpy.polynomial import polynomial as P

from thermoconv.domain.models import RangeLimits


@dataclass(frozen=True, slots=True)
class ExponentialTerm:
    """Additive correction `a0 * exp(a1 * (x - a2)**2)`."""

    a0: float
    a1: float
    a2: float

    def evaluate(self, x: float) -> float:
        return self.a0 * exp(self.a1 * (x - self.a2) ** 2)


@dataclass(frozen=True, slots=True)
class PiecewisePolynomial:
    """One curve segment valid on `[domain_min, domain_max]`.

    Coefficients are stored in ascending degree, so the segment evaluates to
    `sum(coefficients[i] * x**i)` plus the optional exponential term.
    """

    domain_min: float
    domain_max: float
    coefficients: tuple[float, ...]
    exponential: ExponentialTerm | None = None

    def __post_init__(self) -> None:
        if self.domain_min >= self.domain_max:
            raise ValueError("segment domain_min must be < domain_max")
        if not self.coefficients:
            raise ValueError("segment coefficients must not be empty")
        if not all(isfinite(c) for c in self.coefficients):
            raise ValueError("segment coefficients must be finite")

    def contains(self, x: float) -> bool:
        """Inclusive on both ends."""
        return self.domain_min <= x <= self.domain_max

    def evaluate(self, x: float) -> float:
        """Evaluate the segment polynomial at `x` without a domain check."""
        value = float(P.polyval(x, self.coefficients))
        if self.exponential is not None:
            value += self.exponential.evaluate(x)
        return value


@dataclass(frozen=True, slots=True)
class SensorCurve:
    """Forward (temperature -> signal) and inverse (signal -> temperature) fits."""

    forward_segments: tuple[PiecewisePolynomial, ...]
    inverse_segments: tuple[PiecewisePolynomial, ...]

    def __post_init__(self) -> None:
        if not self.forward_segments:
            raise ValueError("forward_segments must not be empty")
        if not self.inverse_segments:
            raise ValueError("inverse_segments must not be empty")
        _check_contiguous(self.forward_segments, "forward_segments")
        _check_contiguous(self.inverse_segments, "inverse_segments")

    @property
    def forward_domain(self) -> RangeLimits:
        return RangeLimits(self.forward_segments[0].domain_min, self.forward_segments[-1].domain_max)

    @property
    def inverse_domain(self) -> RangeLimits:
        return RangeLimits(self.inverse_segments[0].domain_min, self.inverse_segments[-1].domain_max)


def find_segment(
    segments: Sequence[PiecewisePolynomial],
    x: float,
    *,
    end_tolerance: float = 0.0,
) -> PiecewisePolynomial | None:
    """Return the first listed segment containing `x`, or None.

    `end_tolerance` widens only the outer ends of the first and last segments,
    so values rounded off at the published table limits still resolve.
    """
    if end_tolerance < 0:
        raise ValueError("end_tolerance must be >= 0")
    for segment in segments:
        if segment.contains(x):
            return segment
    if not segments or end_tolerance == 0.0:
        return None
    first, last = segments[0], segments[-1]
    if first.domain_min - end_tolerance <= x < first.domain_min:
        return first
    if last.domain_max < x <= last.domain_max + end_tolerance:
        return last
    return None


def validate_curve(curve: SensorCurve, limits: RangeLimits) -> None:
    """Check that the forward segments cover the whole temperature domain."""
    domain = curve.forward_domain
    if domain.min > limits.min or domain.max < limits.max:
        raise ValueError(
            f"forward segments cover [{domain.min}, {domain.max}], "
            f"declared range is [{limits.min}, {limits.max}]"
        )


def _check_contiguous(segments: Sequence[PiecewisePolynomial], name: str) -> None:
    for previous, current in zip(segments, segments[1:]):
        if current.domain_min < previous.domain_max:
            raise ValueError(f"{name} overlap at {current.domain_min}")
        if current.domain_min > previous.domain_max:
            raise ValueError(
                f"{name} gap between {previous.domain_max} and {current.domain_min}"
            )
