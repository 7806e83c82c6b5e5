"""Static registry of sensor temperature domains and descriptive metadata."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from thermoconv.domain.errors import UnknownSensorTypeError
from thermoconv.domain.models import RangeLimits, SensorFamily, SensorType, SignalUnit


@dataclass(frozen=True, slots=True)
class SensorDescriptor:
    """Presentation-facing summary of one catalog entry."""

    sensor_type: SensorType
    family: SensorFamily
    unit: SignalUnit
    standard: str
    limits: RangeLimits
    nominal_alpha: float | None = None
    tolerance: str | None = None


_RANGES: Mapping[SensorType, RangeLimits] = MappingProxyType(
    {
        SensorType.PT100: RangeLimits(-200.0, 850.0),
        SensorType.PT1000: RangeLimits(-200.0, 850.0),
        SensorType.CU50: RangeLimits(-50.0, 150.0),
        SensorType.NI120: RangeLimits(-60.0, 180.0),
        SensorType.K: RangeLimits(-270.0, 1372.0),
        SensorType.J: RangeLimits(-210.0, 1200.0),
        SensorType.T: RangeLimits(-270.0, 400.0),
        SensorType.E: RangeLimits(-270.0, 1000.0),
        SensorType.N: RangeLimits(-270.0, 1300.0),
        SensorType.R: RangeLimits(-50.0, 1768.0),
        SensorType.S: RangeLimits(-50.0, 1768.0),
        SensorType.B: RangeLimits(0.0, 1820.0),
    }
)

# (standard, nominal alpha, tolerance label)
_METADATA: Mapping[SensorType, tuple[str, float | None, str | None]] = MappingProxyType(
    {
        SensorType.PT100: ("IEC 60751", 0.00385, "±0.1%"),
        SensorType.PT1000: ("IEC 60751", 0.00385, "±0.1%"),
        SensorType.CU50: ("GB/T 17621-1998", 0.00428, "±0.2%"),
        SensorType.NI120: ("DIN 43760", 0.00617, "±0.2%"),
        SensorType.K: ("IEC 60584-1", None, None),
        SensorType.J: ("IEC 60584-1", None, None),
        SensorType.T: ("IEC 60584-1", None, None),
        SensorType.E: ("IEC 60584-1", None, None),
        SensorType.N: ("IEC 60584-1", None, None),
        SensorType.R: ("IEC 60584-1", None, None),
        SensorType.S: ("IEC 60584-1", None, None),
        SensorType.B: ("IEC 60584-1", None, None),
    }
)


def range_of(sensor_type: SensorType) -> RangeLimits:
    """Return the valid temperature domain (°C) for a sensor type."""
    try:
        return _RANGES[sensor_type]
    except KeyError:
        raise UnknownSensorTypeError(str(sensor_type)) from None


def in_domain(value: float, limits: RangeLimits) -> bool:
    """Whether a temperature or signal value lies inside `limits` (inclusive)."""
    return limits.contains(value)


def describe(sensor_type: SensorType) -> SensorDescriptor:
    """Build the descriptor shown next to a sensor selection."""
    limits = range_of(sensor_type)
    standard, alpha, tolerance = _METADATA[sensor_type]
    return SensorDescriptor(
        sensor_type=sensor_type,
        family=sensor_type.family,
        unit=sensor_type.unit,
        standard=standard,
        limits=limits,
        nominal_alpha=alpha,
        tolerance=tolerance,
    )


def sensors_of(family: SensorFamily) -> tuple[SensorType, ...]:
    """Catalog members of one family, in declaration order."""
    return tuple(sensor for sensor in SensorType if sensor.family is family)
