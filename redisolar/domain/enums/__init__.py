"""Domain Enums."""

from redisolar.domain.enums.geo_unit import GeoUnit
from redisolar.domain.enums.metric_unit import MetricUnit

__all__ = ["GeoUnit", "MetricUnit"]
