"""Redis 예외 변환."""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from redis.exceptions import RedisError

from redisolar.application.common.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def translate_store_errors(
    func: Callable[..., Awaitable[T]],
) -> Callable[..., Awaitable[T]]:
    """RedisError를 StoreUnavailableError로 바꿔 다시 던집니다.

    재시도나 복구 없이 원래 예외를 __cause__로 보존합니다.
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return await func(*args, **kwargs)
        except RedisError as e:
            logger.warning(
                "Redis command failed",
                extra={"operation": func.__qualname__, "error": str(e)},
            )
            raise StoreUnavailableError(str(e) or type(e).__name__) from e

    return wrapper
