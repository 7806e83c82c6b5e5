"""Tests for thermocouple reference tables and conversions."""

from __future__ import annotations

import numpy as np
import pytest

from thermoconv.catalog import range_of, sensors_of
from thermoconv.domain import (
    NoMatchingSegmentError,
    OutOfDomainRangeError,
    SensorFamily,
    SensorType,
    UnknownSensorTypeError,
)
from thermoconv.numerics import find_segment, validate_curve
from thermoconv.thermocouple import (
    INVERSE_END_TOLERANCE_MV,
    INVERSE_FIT_LIMITS,
    THERMOCOUPLE_CURVES,
    ThermocoupleModel,
    curve_for,
)

TC_TYPES = sensors_of(SensorFamily.THERMOCOUPLE)


@pytest.fixture
def model() -> ThermocoupleModel:
    return ThermocoupleModel()


def _inverse_fit_grid(sensor: SensorType) -> np.ndarray:
    limits = INVERSE_FIT_LIMITS[sensor]
    return np.arange(limits.min, limits.max + 0.5, 1.0, dtype=np.float64)


def _domain_grid(sensor: SensorType) -> np.ndarray:
    limits = range_of(sensor)
    # type B EMF has a minimum near 21 °C
    start = 22.0 if sensor is SensorType.B else limits.min
    return np.arange(start, limits.max + 0.5, 1.0, dtype=np.float64)


def test_type_k_reference_values(model: ThermocoupleModel) -> None:
    assert model.forward(0.0, SensorType.K) == 0.0
    assert model.forward(100.0, SensorType.K) == pytest.approx(4.10, abs=0.02)
    assert model.forward(1000.0, SensorType.K) == pytest.approx(41.276, abs=0.003)
    assert model.forward(-200.0, SensorType.K) == pytest.approx(-5.891, abs=0.003)


@pytest.mark.parametrize(
    ("sensor", "temp_c", "emf_mv"),
    [
        (SensorType.J, 100.0, 5.269),
        (SensorType.T, 100.0, 4.279),
        (SensorType.E, 100.0, 6.319),
        (SensorType.N, 100.0, 2.774),
        (SensorType.R, 1000.0, 10.506),
        (SensorType.S, 1000.0, 9.587),
        (SensorType.B, 1000.0, 4.834),
    ],
)
def test_nist_reference_points(
    model: ThermocoupleModel,
    sensor: SensorType,
    temp_c: float,
    emf_mv: float,
) -> None:
    assert model.forward(temp_c, sensor) == pytest.approx(emf_mv, abs=0.003)


@pytest.mark.parametrize("sensor", TC_TYPES)
def test_tables_cover_declared_domain(sensor: SensorType) -> None:
    curve = THERMOCOUPLE_CURVES[sensor]
    limits = range_of(sensor)

    validate_curve(curve, limits)
    for temp in np.arange(limits.min, limits.max + 0.5, 1.0):
        assert find_segment(curve.forward_segments, float(temp)) is not None


@pytest.mark.parametrize("sensor", TC_TYPES)
def test_domain_bounds_succeed(model: ThermocoupleModel, sensor: SensorType) -> None:
    limits = range_of(sensor)
    signal = model.signal_range(sensor)

    assert model.forward(limits.min, sensor) == signal.min
    assert model.forward(limits.max, sensor) == signal.max


@pytest.mark.parametrize("sensor", TC_TYPES)
def test_round_trip_within_inverse_fit_error(model: ThermocoupleModel, sensor: SensorType) -> None:
    for temp in _inverse_fit_grid(sensor):
        emf = model.forward(float(temp), sensor)
        assert abs(model.inverse(emf, sensor) - temp) < 0.5


@pytest.mark.parametrize("sensor", TC_TYPES)
def test_round_trip_at_inverse_fit_endpoints(model: ThermocoupleModel, sensor: SensorType) -> None:
    limits = INVERSE_FIT_LIMITS[sensor]

    for temp in (limits.min, limits.max):
        emf = model.forward(temp, sensor)
        assert model.inverse(emf, sensor) == pytest.approx(temp, abs=0.1)


def test_inverse_end_tolerance_does_not_bridge_real_gaps(model: ThermocoupleModel) -> None:
    calibrated = model.calibrated_signal_range(SensorType.K)

    assert model.inverse(calibrated.max + 0.5 * INVERSE_END_TOLERANCE_MV, SensorType.K) == pytest.approx(
        1372.0, abs=0.1
    )
    with pytest.raises(NoMatchingSegmentError):
        model.inverse(calibrated.min - 2 * INVERSE_END_TOLERANCE_MV, SensorType.K)


@pytest.mark.parametrize("sensor", TC_TYPES)
def test_forward_strictly_increasing_over_declared_domain(
    model: ThermocoupleModel,
    sensor: SensorType,
) -> None:
    values = np.asarray([model.forward(float(t), sensor) for t in _domain_grid(sensor)])

    assert np.all(np.diff(values) > 0)


def test_type_b_emf_dips_below_zero_near_room_temperature(model: ThermocoupleModel) -> None:
    assert model.forward(20.0, SensorType.B) < model.forward(0.0, SensorType.B)


def test_inverse_reports_gap_below_fitted_span(model: ThermocoupleModel) -> None:
    with pytest.raises(NoMatchingSegmentError) as excinfo:
        model.inverse(-6.0, SensorType.K)

    assert excinfo.value.kind == "no_matching_segment"
    assert excinfo.value.sensor_type is SensorType.K


def test_inverse_segment_boundary_uses_first_listed(model: ThermocoupleModel) -> None:
    curve = curve_for(SensorType.K)
    boundary = curve.inverse_segments[1].domain_max

    assert model.inverse(boundary, SensorType.K) == pytest.approx(
        curve.inverse_segments[1].evaluate(boundary)
    )
    assert model.inverse(boundary, SensorType.K) == pytest.approx(500.0, abs=0.1)


def test_corrected_type_r_high_range_inverse(model: ThermocoupleModel) -> None:
    emf = model.forward(1300.0, SensorType.R)

    assert model.inverse(emf, SensorType.R) == pytest.approx(1300.0, abs=0.01)


def test_calibrated_signal_range_matches_inverse_table(model: ThermocoupleModel) -> None:
    calibrated = model.calibrated_signal_range(SensorType.K)

    assert calibrated.min == -5.891
    assert calibrated.max == 54.886


def test_forward_rejects_out_of_range_temperature(model: ThermocoupleModel) -> None:
    with pytest.raises(OutOfDomainRangeError):
        model.forward(1400.0, SensorType.K)


def test_rtd_type_is_rejected(model: ThermocoupleModel) -> None:
    with pytest.raises(UnknownSensorTypeError, match="not a thermocouple"):
        model.forward(25.0, SensorType.PT100)
