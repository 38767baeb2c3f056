"""Domain Services."""

from redisolar.domain.services import time_buckets

__all__ = ["time_buckets"]
