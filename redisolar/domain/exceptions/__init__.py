"""도메인 예외."""

from redisolar.domain.exceptions.base import DomainError
from redisolar.domain.exceptions.metric import TooManyMetricsError
from redisolar.domain.exceptions.validation import (
    CoordinateOutOfGeoRangeError,
    CoordinateRequiredError,
    InvalidGeoUnitError,
    InvalidRadiusError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "CoordinateRequiredError",
    "CoordinateOutOfGeoRangeError",
    "InvalidGeoUnitError",
    "InvalidRadiusError",
    "TooManyMetricsError",
]
