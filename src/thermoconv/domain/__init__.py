"""Domain models and error kinds for sensor conversion."""

from thermoconv.domain.errors import (
    ConversionError,
    NoMatchingSegmentError,
    NumericDomainError,
    OutOfDomainRangeError,
    UnknownSensorTypeError,
)
from thermoconv.domain.models import RangeLimits, SensorFamily, SensorType, SignalUnit

__all__ = [
    "ConversionError",
    "NoMatchingSegmentError",
    "NumericDomainError",
    "OutOfDomainRangeError",
    "RangeLimits",
    "SensorFamily",
    "SensorType",
    "SignalUnit",
    "UnknownSensorTypeError",
]
