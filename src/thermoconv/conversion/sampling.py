"""Sampled (temperature, signal) curves for chart collaborators."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from thermoconv.catalog.ranges import range_of
from thermoconv.conversion.facade import ConversionFacade, default_facade
from thermoconv.domain.models import SensorType, SignalUnit


FloatArray = npt.NDArray[np.float64]

CHART_TEMPERATURES_C: tuple[float, ...] = (-50, -30, -10, 0, 20, 40, 60, 80, 100, 120, 150)


@dataclass(frozen=True, slots=True)
class CurveSample:
    """Forward conversion evaluated on a temperature grid."""

    sensor_type: SensorType
    unit: SignalUnit
    temperatures_c: FloatArray
    signal: FloatArray

    def pairs(self) -> tuple[tuple[float, float], ...]:
        return tuple(
            (float(t), float(s)) for t, s in zip(self.temperatures_c, self.signal)
        )


def linspace_temperatures(sensor_type: SensorType | str, num: int = 50) -> FloatArray:
    """Evenly spaced grid across the sensor's whole temperature domain."""
    if num < 2:
        raise ValueError("num must be >= 2")
    limits = range_of(SensorType.parse(sensor_type))
    return np.linspace(limits.min, limits.max, num, dtype=np.float64)


def chart_temperatures(sensor_type: SensorType | str) -> FloatArray:
    """Default chart grid restricted to the sensor's domain."""
    limits = range_of(SensorType.parse(sensor_type))
    grid = np.asarray(CHART_TEMPERATURES_C, dtype=np.float64)
    inside = grid[(grid >= limits.min) & (grid <= limits.max)]
    if inside.size < 2:
        return linspace_temperatures(sensor_type, num=len(CHART_TEMPERATURES_C))
    return inside


def sample_curve(
    sensor_type: SensorType | str,
    temperatures: npt.ArrayLike | None = None,
    *,
    facade: ConversionFacade | None = None,
) -> CurveSample:
    """Evaluate the forward conversion at each grid temperature."""
    sensor = SensorType.parse(sensor_type)
    engine = facade if facade is not None else default_facade()

    if temperatures is None:
        x = chart_temperatures(sensor)
    else:
        x = np.asarray(temperatures, dtype=np.float64)
        if x.ndim != 1:
            raise ValueError("temperatures must be 1D")
        if x.size == 0:
            raise ValueError("temperatures must not be empty")
        if not np.all(np.isfinite(x)):
            raise ValueError("temperatures must contain only finite values")

    signal = np.fromiter(
        (engine.to_signal(float(t), sensor) for t in x),
        dtype=np.float64,
        count=x.size,
    )
    return CurveSample(sensor_type=sensor, unit=sensor.unit, temperatures_c=x, signal=signal)
