"""redisolar 테스트 공통 Fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).resolve().parents[2]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from redisolar.domain.entities import Site
from redisolar.domain.value_objects import Coordinate
from redisolar.infrastructure.persistence_redis.key_generator import RedisKeyGenerator

TEST_KEY_PREFIX = "test:unit"


@pytest.fixture
def key_generator() -> RedisKeyGenerator:
    """테스트 prefix를 쓰는 키 생성기."""
    return RedisKeyGenerator(TEST_KEY_PREFIX)


@pytest.fixture
def mock_redis() -> MagicMock:
    """Mock Redis 클라이언트.

    pipeline()은 동기 호출이므로 클라이언트 자체는 MagicMock,
    await 되는 명령만 AsyncMock으로 둡니다.
    """
    redis = MagicMock()
    redis.hset = AsyncMock(return_value=1)
    redis.hgetall = AsyncMock(return_value={})
    redis.geoadd = AsyncMock(return_value=1)
    redis.georadius = AsyncMock(return_value=[])
    redis.zrange = AsyncMock(return_value=[])
    redis.zrangebyscore = AsyncMock(return_value=[])
    redis.zrevrangebyscore = AsyncMock(return_value=[])
    redis.set = AsyncMock(return_value=True)
    redis.get = AsyncMock(return_value=None)
    redis.ping = AsyncMock(return_value=True)
    redis.aclose = AsyncMock()
    return redis


@pytest.fixture
def make_pipeline() -> Callable[..., MagicMock]:
    """execute()가 results를 돌려주는 Mock pipeline 팩토리."""

    def _make(results: list | None = None) -> MagicMock:
        pipeline = MagicMock()
        pipeline.execute = AsyncMock(return_value=results if results is not None else [])
        return pipeline

    return _make


@pytest.fixture
def sample_site() -> Site:
    """좌표가 있는 테스트 사이트."""
    return Site(
        id=1,
        panels=4,
        capacity=4.5,
        coordinate=Coordinate(lat=37.7749, lng=-122.4194),
        address="910 Pine St",
        city="Oakland",
        state="CA",
        postal_code="94577",
    )


@pytest.fixture
def site_without_coordinate() -> Site:
    """좌표 없는 테스트 사이트."""
    return Site(id=2, panels=2, capacity=1.5)
