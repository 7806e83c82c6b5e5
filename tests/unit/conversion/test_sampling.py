"""Tests for chart-oriented curve sampling."""

from __future__ import annotations

import numpy as np
import pytest

from thermoconv.conversion import (
    CHART_TEMPERATURES_C,
    chart_temperatures,
    linspace_temperatures,
    rtd_forward,
    sample_curve,
)
from thermoconv.domain import OutOfDomainRangeError, SensorType, SignalUnit


def test_default_grid_matches_chart_for_pt100() -> None:
    sample = sample_curve(SensorType.PT100)

    assert sample.unit is SignalUnit.OHM
    assert sample.temperatures_c.shape == (len(CHART_TEMPERATURES_C),)
    assert sample.signal[3] == pytest.approx(100.0)
    assert sample.signal[8] == pytest.approx(rtd_forward(100.0, SensorType.PT100))


def test_default_grid_is_clipped_to_domain() -> None:
    grid = chart_temperatures(SensorType.B)

    assert grid.min() == 0.0
    assert np.all(grid >= 0.0)


def test_custom_grid_and_pairs() -> None:
    sample = sample_curve("K", [0.0, 100.0])
    pairs = sample.pairs()

    assert sample.unit is SignalUnit.MILLIVOLT
    assert pairs[0] == (0.0, 0.0)
    assert pairs[1][1] == pytest.approx(4.096, abs=0.002)


def test_linspace_spans_whole_domain() -> None:
    grid = linspace_temperatures(SensorType.CU50, num=5)

    assert grid.tolist() == [-50.0, 0.0, 50.0, 100.0, 150.0]
    with pytest.raises(ValueError, match=">= 2"):
        linspace_temperatures(SensorType.CU50, num=1)


def test_signal_increases_along_rtd_curve() -> None:
    sample = sample_curve(SensorType.NI120, linspace_temperatures(SensorType.NI120, num=25))

    assert np.all(np.diff(sample.signal) > 0)


def test_invalid_grids_are_rejected() -> None:
    with pytest.raises(ValueError, match="1D"):
        sample_curve(SensorType.PT100, [[0.0, 1.0]])
    with pytest.raises(ValueError, match="empty"):
        sample_curve(SensorType.PT100, [])
    with pytest.raises(ValueError, match="finite"):
        sample_curve(SensorType.PT100, [0.0, np.nan])
    with pytest.raises(OutOfDomainRangeError):
        sample_curve(SensorType.CU50, [0.0, 200.0])
