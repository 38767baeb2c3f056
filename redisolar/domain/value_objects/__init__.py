"""Value Objects."""

from redisolar.domain.value_objects.coordinate import Coordinate

__all__ = ["Coordinate"]
