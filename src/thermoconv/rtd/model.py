"""Forward and inverse conversion for resistance thermometers."""

from __future__ import annotations

import logging
from math import sqrt

from thermoconv.catalog.ranges import in_domain, range_of
from thermoconv.domain.errors import NumericDomainError, OutOfDomainRangeError
from thermoconv.domain.models import RangeLimits, SensorType
from thermoconv.numerics.root_finding import bisect_monotone
from thermoconv.rtd.parameters import RTDForm, RTDParameters, parameters_for
from thermoconv.settings import get_settings

logger = logging.getLogger(__name__)


def resistance_at(temp_c: float, params: RTDParameters) -> float:
    """Evaluate the resistance equation with no range check."""
    t = temp_c
    r0, a, b, c = params.r0, params.a, params.b, params.c
    if params.form is RTDForm.CALLENDAR_VAN_DUSEN:
        if t >= 0:
            return r0 * (1 + a * t + b * t * t)
        return r0 * (1 + a * t + b * t * t + c * (t - 100) * t * t * t)
    if params.form is RTDForm.COPPER:
        if t >= 0:
            return r0 * (1 + a * t + b * t * t)
        return r0 * (1 + a * t)
    if params.form is RTDForm.NICKEL:
        return r0 * (1 + a * t + b * t * t + c * t * t * t * t)
    raise ValueError(f"unsupported RTD form: {params.form}")


def quadratic_temperature(
    ratio: float,
    params: RTDParameters,
    sensor_type: SensorType,
) -> float:
    """Invert `1 + a t + b t^2 = ratio` for the physical root."""
    a, b = params.a, params.b
    discriminant = a * a - 4 * b * (1 - ratio)
    if discriminant < 0:
        raise NumericDomainError(ratio * params.r0, sensor_type, discriminant)
    return (-a + sqrt(discriminant)) / (2 * b)


class RTDModel:
    """Stateless converter between temperature (°C) and RTD resistance (ohm)."""

    def __init__(self, *, tolerance: float | None = None) -> None:
        resolved = get_settings().bisection_tolerance if tolerance is None else tolerance
        if resolved <= 0:
            raise ValueError("tolerance must be > 0")
        self._tolerance = resolved

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def forward(self, temp_c: float, sensor_type: SensorType) -> float:
        """Resistance in ohms at `temp_c`."""
        params = parameters_for(sensor_type)
        limits = range_of(sensor_type)
        if not in_domain(temp_c, limits):
            raise OutOfDomainRangeError(temp_c, limits, sensor_type)
        return resistance_at(temp_c, params)

    def signal_range(self, sensor_type: SensorType) -> RangeLimits:
        """Resistance interval spanned by the temperature domain."""
        params = parameters_for(sensor_type)
        limits = range_of(sensor_type)
        return RangeLimits(resistance_at(limits.min, params), resistance_at(limits.max, params))

    def inverse(self, resistance: float, sensor_type: SensorType) -> float:
        """Temperature in °C producing `resistance`."""
        params = parameters_for(sensor_type)
        signal_limits = self.signal_range(sensor_type)
        if not in_domain(resistance, signal_limits):
            raise OutOfDomainRangeError(resistance, signal_limits, sensor_type, quantity="resistance")

        ratio = resistance / params.r0
        if params.form is RTDForm.CALLENDAR_VAN_DUSEN:
            if ratio >= 1:
                return quadratic_temperature(ratio, params, sensor_type)
            return self._bisect(resistance, range_of(sensor_type).min, 0.0, params, sensor_type)
        if params.form is RTDForm.COPPER:
            if ratio >= 1:
                return quadratic_temperature(ratio, params, sensor_type)
            return (ratio - 1) / params.a
        if params.form is RTDForm.NICKEL:
            limits = range_of(sensor_type)
            return self._bisect(resistance, limits.min, limits.max, params, sensor_type)
        raise ValueError(f"unsupported RTD form: {params.form}")

    def _bisect(
        self,
        resistance: float,
        low: float,
        high: float,
        params: RTDParameters,
        sensor_type: SensorType,
    ) -> float:
        logger.debug(
            "inverting resistance by bisection",
            extra={"sensor_type": sensor_type.value, "value": resistance},
        )
        return bisect_monotone(
            resistance,
            low,
            high,
            lambda t: resistance_at(t, params),
            tolerance=self._tolerance,
        )
