"""Public conversion API and curve sampling."""

from thermoconv.conversion.facade import (
    ConversionFacade,
    default_facade,
    rtd_forward,
    rtd_inverse,
    sensor_range,
    tc_forward,
    tc_inverse,
)
from thermoconv.conversion.sampling import (
    CHART_TEMPERATURES_C,
    CurveSample,
    chart_temperatures,
    linspace_temperatures,
    sample_curve,
)

__all__ = [
    "CHART_TEMPERATURES_C",
    "ConversionFacade",
    "CurveSample",
    "chart_temperatures",
    "default_facade",
    "linspace_temperatures",
    "rtd_forward",
    "rtd_inverse",
    "sample_curve",
    "sensor_range",
    "tc_forward",
    "tc_inverse",
]
