"""Core domain models for thermoconv."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from math import isnan

from thermoconv.domain.errors import UnknownSensorTypeError


class SensorFamily(StrEnum):
    """Physical principle a sensor uses to encode temperature."""

    RTD = "rtd"
    THERMOCOUPLE = "thermocouple"


class SignalUnit(StrEnum):
    """Native electrical signal unit per sensor family."""

    OHM = "ohm"
    MILLIVOLT = "mV"


class SensorType(StrEnum):
    """Closed catalog of supported temperature sensors."""

    PT100 = "PT100"
    PT1000 = "PT1000"
    CU50 = "Cu50"
    NI120 = "Ni120"
    K = "K"
    J = "J"
    T = "T"
    E = "E"
    N = "N"
    R = "R"
    S = "S"
    B = "B"

    @property
    def family(self) -> SensorFamily:
        """Family this sensor belongs to."""
        return _FAMILIES[self]

    @property
    def unit(self) -> SignalUnit:
        """Unit of the sensor's native signal."""
        if self.family is SensorFamily.RTD:
            return SignalUnit.OHM
        return SignalUnit.MILLIVOLT

    @classmethod
    def parse(cls, name: str | SensorType) -> SensorType:
        """Resolve a sensor name case-insensitively."""
        if isinstance(name, SensorType):
            return name
        candidate = str(name).strip().lower()
        for member in cls:
            if member.value.lower() == candidate:
                return member
        raise UnknownSensorTypeError(str(name))


_FAMILIES: dict[SensorType, SensorFamily] = {
    SensorType.PT100: SensorFamily.RTD,
    SensorType.PT1000: SensorFamily.RTD,
    SensorType.CU50: SensorFamily.RTD,
    SensorType.NI120: SensorFamily.RTD,
    SensorType.K: SensorFamily.THERMOCOUPLE,
    SensorType.J: SensorFamily.THERMOCOUPLE,
    SensorType.T: SensorFamily.THERMOCOUPLE,
    SensorType.E: SensorFamily.THERMOCOUPLE,
    SensorType.N: SensorFamily.THERMOCOUPLE,
    SensorType.R: SensorFamily.THERMOCOUPLE,
    SensorType.S: SensorFamily.THERMOCOUPLE,
    SensorType.B: SensorFamily.THERMOCOUPLE,
}


@dataclass(frozen=True, slots=True)
class RangeLimits:
    """Closed interval `[min, max]` of valid values."""

    min: float
    max: float

    def __post_init__(self) -> None:
        if isnan(self.min) or isnan(self.max):
            raise ValueError("range limits must not be NaN")
        if self.min >= self.max:
            raise ValueError("range min must be < max")

    def contains(self, value: float) -> bool:
        """Inclusive membership test; NaN is never contained."""
        return self.min <= value <= self.max
