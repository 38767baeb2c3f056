"""RediSolar Domain Layer."""

from redisolar.domain.entities import Measurement, MeterReading, Site
from redisolar.domain.enums import GeoUnit, MetricUnit
from redisolar.domain.value_objects import Coordinate

__all__ = ["Site", "MeterReading", "Measurement", "Coordinate", "GeoUnit", "MetricUnit"]
