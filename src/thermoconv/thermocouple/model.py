"""Forward and inverse conversion for thermocouples via segmented reference tables."""

from __future__ import annotations

import logging

from thermoconv.catalog.ranges import in_domain, range_of
from thermoconv.domain.errors import NoMatchingSegmentError, OutOfDomainRangeError
from thermoconv.domain.models import RangeLimits, SensorType
from thermoconv.numerics.polynomials import find_segment
from thermoconv.thermocouple.tables import INVERSE_END_TOLERANCE_MV, curve_for

logger = logging.getLogger(__name__)


class ThermocoupleModel:
    """Stateless converter between temperature (°C) and thermocouple EMF (mV).

    The inverse uses the independently fitted inverse tables, so a round trip
    carries the approximation error of both fits rather than agreeing exactly.
    """

    def forward(self, temp_c: float, sensor_type: SensorType) -> float:
        """EMF in mV at `temp_c` with the reference junction at 0 °C."""
        curve = curve_for(sensor_type)
        limits = range_of(sensor_type)
        if not in_domain(temp_c, limits):
            raise OutOfDomainRangeError(temp_c, limits, sensor_type)
        segment = find_segment(curve.forward_segments, temp_c)
        if segment is None:
            raise NoMatchingSegmentError(temp_c, sensor_type, table="forward")
        return segment.evaluate(temp_c)

    def inverse(self, voltage_mv: float, sensor_type: SensorType) -> float:
        """Temperature in °C for an EMF in mV."""
        curve = curve_for(sensor_type)
        segment = find_segment(
            curve.inverse_segments,
            voltage_mv,
            end_tolerance=INVERSE_END_TOLERANCE_MV,
        )
        if segment is None:
            logger.debug(
                "voltage outside inverse table",
                extra={"sensor_type": sensor_type.value, "value": voltage_mv},
            )
            raise NoMatchingSegmentError(voltage_mv, sensor_type)
        return segment.evaluate(voltage_mv)

    def signal_range(self, sensor_type: SensorType) -> RangeLimits:
        """EMF at the lower and upper temperature limits."""
        limits = range_of(sensor_type)
        return RangeLimits(
            self.forward(limits.min, sensor_type),
            self.forward(limits.max, sensor_type),
        )

    def calibrated_signal_range(self, sensor_type: SensorType) -> RangeLimits:
        """EMF span covered by the inverse table."""
        return curve_for(sensor_type).inverse_domain
