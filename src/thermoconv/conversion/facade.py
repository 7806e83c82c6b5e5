"""Type-dispatching conversion API over the RTD and thermocouple models."""

from __future__ import annotations

from functools import lru_cache

from thermoconv.catalog.ranges import in_domain, range_of
from thermoconv.domain.errors import OutOfDomainRangeError, UnknownSensorTypeError
from thermoconv.domain.models import RangeLimits, SensorFamily, SensorType
from thermoconv.rtd.model import RTDModel
from thermoconv.thermocouple.model import ThermocoupleModel


class ConversionFacade:
    """Validate inputs and route them to the model of the sensor's family."""

    def __init__(
        self,
        *,
        rtd_model: RTDModel | None = None,
        thermocouple_model: ThermocoupleModel | None = None,
    ) -> None:
        self._rtd = rtd_model if rtd_model is not None else RTDModel()
        self._tc = thermocouple_model if thermocouple_model is not None else ThermocoupleModel()

    def sensor_range(self, sensor_type: SensorType | str) -> RangeLimits:
        return range_of(SensorType.parse(sensor_type))

    def signal_range(self, sensor_type: SensorType | str) -> RangeLimits:
        sensor = SensorType.parse(sensor_type)
        if sensor.family is SensorFamily.RTD:
            return self._rtd.signal_range(sensor)
        return self._tc.signal_range(sensor)

    def calibrated_signal_range(self, sensor_type: SensorType | str) -> RangeLimits:
        """EMF span covered by a thermocouple's inverse table."""
        sensor = _require_family(sensor_type, SensorFamily.THERMOCOUPLE)
        return self._tc.calibrated_signal_range(sensor)

    def rtd_forward(self, temp_c: float, sensor_type: SensorType | str) -> float:
        sensor = _require_family(sensor_type, SensorFamily.RTD)
        return self._rtd.forward(temp_c, sensor)

    def rtd_inverse(self, resistance_ohm: float, sensor_type: SensorType | str) -> float:
        """Temperature for a resistance; the RTD model checks the resistance range."""
        sensor = _require_family(sensor_type, SensorFamily.RTD)
        return self._rtd.inverse(resistance_ohm, sensor)

    def tc_forward(self, temp_c: float, sensor_type: SensorType | str) -> float:
        sensor = _require_family(sensor_type, SensorFamily.THERMOCOUPLE)
        return self._tc.forward(temp_c, sensor)

    def tc_inverse(self, voltage_mv: float, sensor_type: SensorType | str) -> float:
        """Temperature for an EMF.

        Raises `OutOfDomainRangeError` when the EMF lies outside the EMF span of
        the temperature domain, and `NoMatchingSegmentError` when it is inside
        that span but not covered by the inverse table.
        """
        sensor = _require_family(sensor_type, SensorFamily.THERMOCOUPLE)
        _check_signal(voltage_mv, self._tc.signal_range(sensor), sensor, "voltage")
        return self._tc.inverse(voltage_mv, sensor)

    def to_signal(self, temp_c: float, sensor_type: SensorType | str) -> float:
        """Forward conversion for either family."""
        sensor = SensorType.parse(sensor_type)
        if sensor.family is SensorFamily.RTD:
            return self.rtd_forward(temp_c, sensor)
        return self.tc_forward(temp_c, sensor)

    def to_temperature(self, signal: float, sensor_type: SensorType | str) -> float:
        """Inverse conversion for either family."""
        sensor = SensorType.parse(sensor_type)
        if sensor.family is SensorFamily.RTD:
            return self.rtd_inverse(signal, sensor)
        return self.tc_inverse(signal, sensor)


def _require_family(sensor_type: SensorType | str, family: SensorFamily) -> SensorType:
    sensor = SensorType.parse(sensor_type)
    if sensor.family is not family:
        raise UnknownSensorTypeError(sensor.value, f"expected a {family.value} sensor")
    return sensor


def _check_signal(value: float, limits: RangeLimits, sensor: SensorType, quantity: str) -> None:
    if not in_domain(value, limits):
        raise OutOfDomainRangeError(value, limits, sensor, quantity=quantity)


@lru_cache
def default_facade() -> ConversionFacade:
    return ConversionFacade()


def sensor_range(sensor_type: SensorType | str) -> RangeLimits:
    return default_facade().sensor_range(sensor_type)


def rtd_forward(temp_c: float, sensor_type: SensorType | str) -> float:
    return default_facade().rtd_forward(temp_c, sensor_type)


def rtd_inverse(resistance_ohm: float, sensor_type: SensorType | str) -> float:
    return default_facade().rtd_inverse(resistance_ohm, sensor_type)


def tc_forward(temp_c: float, sensor_type: SensorType | str) -> float:
    return default_facade().tc_forward(temp_c, sensor_type)


def tc_inverse(voltage_mv: float, sensor_type: SensorType | str) -> float:
    return default_facade().tc_inverse(voltage_mv, sensor_type)
