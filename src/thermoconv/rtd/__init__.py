"""Resistance-temperature detector conversions."""

from thermoconv.rtd.model import RTDModel, quadratic_temperature, resistance_at
from thermoconv.rtd.parameters import RTD_PARAMETERS, RTDForm, RTDParameters, parameters_for

__all__ = [
    "RTDForm",
    "RTDModel",
    "RTDParameters",
    "RTD_PARAMETERS",
    "parameters_for",
    "quadratic_temperature",
    "resistance_at",
]
