"""Conversion error kinds raised by the engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from thermoconv.domain.models import RangeLimits, SensorType


class ConversionError(ValueError):
    """Base class for every deterministic conversion failure."""

    kind = "conversion_error"


class UnknownSensorTypeError(ConversionError):
    """Sensor name is outside the catalog or used with the wrong family."""

    kind = "unknown_sensor_type"

    def __init__(self, name: str, detail: str | None = None) -> None:
        self.name = name
        message = f"unknown sensor type: {name}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class OutOfDomainRangeError(ConversionError):
    """Temperature or signal lies outside the sensor's declared range."""

    kind = "out_of_domain_range"

    def __init__(
        self,
        value: float,
        limits: RangeLimits,
        sensor_type: SensorType,
        quantity: str = "temperature",
    ) -> None:
        self.value = value
        self.limits = limits
        self.sensor_type = sensor_type
        self.quantity = quantity
        super().__init__(
            f"{quantity} {value} outside [{limits.min}, {limits.max}] for {sensor_type.value}"
        )


class NoMatchingSegmentError(ConversionError):
    """No calibration segment contains the requested value."""

    kind = "no_matching_segment"

    def __init__(self, value: float, sensor_type: SensorType, table: str = "inverse") -> None:
        self.value = value
        self.sensor_type = sensor_type
        self.table = table
        super().__init__(f"no {table} segment of {sensor_type.value} contains {value}")


class NumericDomainError(ConversionError):
    """Closed-form inversion hit a negative discriminant."""

    kind = "numeric_domain_error"

    def __init__(self, value: float, sensor_type: SensorType, discriminant: float) -> None:
        self.value = value
        self.sensor_type = sensor_type
        self.discriminant = discriminant
        super().__init__(
            f"negative discriminant {discriminant:.6g} inverting {value} for {sensor_type.value}"
        )
