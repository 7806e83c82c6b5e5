"""Thermocouple reference tables and conversions."""

from thermoconv.thermocouple.model import ThermocoupleModel
from thermoconv.thermocouple.tables import (
    INVERSE_END_TOLERANCE_MV,
    INVERSE_FIT_LIMITS,
    THERMOCOUPLE_CURVES,
    curve_for,
)

__all__ = [
    "INVERSE_END_TOLERANCE_MV",
    "INVERSE_FIT_LIMITS",
    "THERMOCOUPLE_CURVES",
    "ThermocoupleModel",
    "curve_for",
]
