"""Callendar-Van Dusen style coefficient sets for the supported RTDs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Mapping

from thermoconv.domain.errors import UnknownSensorTypeError
from thermoconv.domain.models import SensorType


class RTDForm(StrEnum):
    """Which resistance equation a coefficient set feeds."""

    CALLENDAR_VAN_DUSEN = "callendar_van_dusen"
    COPPER = "copper"
    NICKEL = "nickel"


@dataclass(frozen=True, slots=True)
class RTDParameters:
    """Nominal resistance at 0 °C and polynomial coefficients."""

    r0: float
    a: float
    b: float
    c: float
    form: RTDForm

    def __post_init__(self) -> None:
        if self.r0 <= 0:
            raise ValueError("r0 must be > 0")
        if self.a <= 0:
            raise ValueError("a must be > 0")


# IEC 60751
_PT_A = 3.9083e-3
_PT_B = -5.775e-7
_PT_C = -4.183e-12

# GB/T 17621-1998; c is published but the copper form only uses a and b
_CU_A = 4.28e-3
_CU_B = -6.2032e-7
_CU_C = 8.5154e-10

# DIN 43760
_NI_A = 5.485e-3
_NI_B = 6.65e-6
_NI_C = 2.805e-11

RTD_PARAMETERS: Mapping[SensorType, RTDParameters] = MappingProxyType(
    {
        SensorType.PT100: RTDParameters(100.0, _PT_A, _PT_B, _PT_C, RTDForm.CALLENDAR_VAN_DUSEN),
        SensorType.PT1000: RTDParameters(1000.0, _PT_A, _PT_B, _PT_C, RTDForm.CALLENDAR_VAN_DUSEN),
        SensorType.CU50: RTDParameters(50.0, _CU_A, _CU_B, _CU_C, RTDForm.COPPER),
        SensorType.NI120: RTDParameters(120.0, _NI_A, _NI_B, _NI_C, RTDForm.NICKEL),
    }
)


def parameters_for(sensor_type: SensorType) -> RTDParameters:
    """Coefficient set for an RTD; other families are rejected."""
    params = RTD_PARAMETERS.get(sensor_type)
    if params is None:
        raise UnknownSensorTypeError(str(sensor_type), "not a resistance thermometer")
    return params
