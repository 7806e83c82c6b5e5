"""Bidirectional temperature <-> signal conversion for RTDs and thermocouples."""

from thermoconv.conversion import (
    ConversionFacade,
    rtd_forward,
    rtd_inverse,
    sensor_range,
    tc_forward,
    tc_inverse,
)
from thermoconv.domain import (
    ConversionError,
    NoMatchingSegmentError,
    NumericDomainError,
    OutOfDomainRangeError,
    RangeLimits,
    SensorFamily,
    SensorType,
    UnknownSensorTypeError,
)

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "ConversionFacade",
    "NoMatchingSegmentError",
    "NumericDomainError",
    "OutOfDomainRangeError",
    "RangeLimits",
    "SensorFamily",
    "SensorType",
    "UnknownSensorTypeError",
    "rtd_forward",
    "rtd_inverse",
    "sensor_range",
    "tc_forward",
    "tc_inverse",
]
