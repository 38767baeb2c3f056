"""Domain Entities."""

from redisolar.domain.entities.meter_reading import Measurement, MeterReading
from redisolar.domain.entities.site import Site

__all__ = ["Site", "MeterReading", "Measurement"]
