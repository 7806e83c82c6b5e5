"""Sensor catalog: temperature domains and descriptors."""

from thermoconv.catalog.ranges import SensorDescriptor, describe, in_domain, range_of, sensors_of

__all__ = [
    "SensorDescriptor",
    "describe",
    "in_domain",
    "range_of",
    "sensors_of",
]
