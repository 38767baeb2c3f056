"""RediSolar Hello Example.

Redis에 연결해 SET/GET 한 번씩 수행하고 결과를 로그로 남깁니다.

Run:
    python -m redisolar.main
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from redisolar.setup.dependencies import Container
from redisolar.setup.logging import setup_logging

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)

HELLO_KEY = "hello"
HELLO_VALUE = "world"


async def run_hello(redis: "aioredis.Redis") -> str | None:
    """SET hello world → GET hello.

    Returns:
        GET 결과 (정상이라면 "world")
    """
    reply = await redis.set(HELLO_KEY, HELLO_VALUE)
    logger.info("SET reply", extra={"key": HELLO_KEY, "reply": reply})  # True

    value = await redis.get(HELLO_KEY)
    logger.info("GET reply", extra={"key": HELLO_KEY, "value": value})  # world
    return value


async def main() -> None:
    """Entry point."""
    setup_logging()
    try:
        async with Container() as container:
            await run_hello(container.redis)
    except Exception:
        logger.exception("Hello example failed")
        raise


if __name__ == "__main__":
    asyncio.run(main())
