"""Tests for the static sensor catalog."""

from __future__ import annotations

import math

import pytest

from thermoconv.catalog import describe, in_domain, range_of, sensors_of
from thermoconv.domain import RangeLimits, SensorFamily, SensorType, SignalUnit


def test_range_of_is_total_over_catalog() -> None:
    for sensor in SensorType:
        limits = range_of(sensor)
        assert limits.min < limits.max


@pytest.mark.parametrize(
    ("sensor", "low", "high"),
    [
        (SensorType.PT100, -200.0, 850.0),
        (SensorType.CU50, -50.0, 150.0),
        (SensorType.NI120, -60.0, 180.0),
        (SensorType.K, -270.0, 1372.0),
        (SensorType.R, -50.0, 1768.0),
        (SensorType.B, 0.0, 1820.0),
    ],
)
def test_declared_ranges(sensor: SensorType, low: float, high: float) -> None:
    assert range_of(sensor) == RangeLimits(low, high)


def test_in_domain_checks_both_bounds_inclusively() -> None:
    limits = range_of(SensorType.PT100)

    assert in_domain(-200.0, limits)
    assert in_domain(850.0, limits)
    assert not in_domain(850.5, limits)
    assert not in_domain(-200.1, limits)
    assert not in_domain(math.nan, limits)


def test_sensors_of_splits_catalog() -> None:
    assert sensors_of(SensorFamily.RTD) == (
        SensorType.PT100,
        SensorType.PT1000,
        SensorType.CU50,
        SensorType.NI120,
    )
    assert len(sensors_of(SensorFamily.THERMOCOUPLE)) == 8


def test_describe_exposes_rtd_info_card_data() -> None:
    descriptor = describe(SensorType.PT100)

    assert descriptor.family is SensorFamily.RTD
    assert descriptor.unit is SignalUnit.OHM
    assert descriptor.standard == "IEC 60751"
    assert descriptor.nominal_alpha == pytest.approx(0.00385)
    assert descriptor.tolerance == "±0.1%"


def test_describe_thermocouple_has_no_alpha() -> None:
    descriptor = describe(SensorType.K)

    assert descriptor.unit is SignalUnit.MILLIVOLT
    assert descriptor.nominal_alpha is None
    assert descriptor.limits == range_of(SensorType.K)
