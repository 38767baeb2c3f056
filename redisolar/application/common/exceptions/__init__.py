"""Application Exceptions."""

from redisolar.application.common.exceptions.base import ApplicationError
from redisolar.application.common.exceptions.gateway import StoreUnavailableError

__all__ = [
    "ApplicationError",
    "StoreUnavailableError",
]
