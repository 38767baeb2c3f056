"""Integration test fixtures.

실제 Redis를 사용합니다. REDISOLAR_TEST_REDIS_URL이 있으면 그 서버를,
없으면 testcontainers로 Redis 컨테이너를 띄웁니다 (Docker 필요).
어느 쪽도 불가능하면 skip 합니다.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import AsyncIterator, Iterator

import pytest
import pytest_asyncio
import redis.asyncio as aioredis
from redis.exceptions import ConnectionError

from redisolar.infrastructure.persistence_redis.key_generator import RedisKeyGenerator

TEST_REDIS_URL_ENV = "REDISOLAR_TEST_REDIS_URL"


@pytest.fixture(scope="session")
def redis_url() -> Iterator[str]:
    """테스트 세션용 Redis URL."""
    url = os.environ.get(TEST_REDIS_URL_ENV)
    if url:
        yield url
        return

    redis_module = pytest.importorskip("testcontainers.redis")
    container = redis_module.RedisContainer("redis:7-alpine")
    try:
        container.start()
    except Exception as e:
        pytest.skip(f"Redis container unavailable: {e}")

    try:
        host = container.get_container_host_ip()
        port = container.get_exposed_port(6379)
        yield f"redis://{host}:{port}/0"
    finally:
        container.stop()


@pytest_asyncio.fixture
async def redis_client(redis_url: str) -> AsyncIterator[aioredis.Redis]:
    """테스트마다 새 클라이언트 (이벤트 루프가 테스트 단위)."""
    client = aioredis.from_url(redis_url, decode_responses=True)
    try:
        await client.ping()
    except ConnectionError as e:
        await client.aclose()
        pytest.skip(f"Redis not reachable: {e}")

    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def key_generator(
    redis_client: aioredis.Redis,
) -> AsyncIterator[RedisKeyGenerator]:
    """테스트 전용 prefix. 종료 시 prefix 아래 키를 모두 삭제합니다."""
    prefix = f"test:{uuid.uuid4().hex[:12]}"
    keys = RedisKeyGenerator(prefix)
    await _delete_prefix(redis_client, prefix)

    yield keys

    await _delete_prefix(redis_client, prefix)


async def _delete_prefix(client: aioredis.Redis, prefix: str) -> None:
    stale = [key async for key in client.scan_iter(match=f"{prefix}:*")]
    if stale:
        await client.delete(*stale)
