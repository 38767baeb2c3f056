"""Dependency Injection.

Composition Root입니다. 모든 의존성을 여기서 조립합니다.

Redis 연결은 Container가 소유하며, 호출자가 init/close(또는 async with)로
수명을 관리합니다.

    async with Container() as container:
        sites = await container.site_geo_dao.find_all()
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TYPE_CHECKING

from redisolar.application.metric.queries import GetSiteMetricsQuery
from redisolar.application.site.queries import GetSitesNearbyQuery
from redisolar.infrastructure.persistence_redis import (
    RedisKeyGenerator,
    RedisMetricDAO,
    RedisSiteGeoDAO,
    build_redis_client,
)
from redisolar.setup.config import Settings, get_settings

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)


class Container:
    """의존성 컨테이너.

    모든 의존성을 생성하고 관리합니다.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._redis: aioredis.Redis | None = None
        self._site_geo_dao: RedisSiteGeoDAO | None = None
        self._metric_dao: RedisMetricDAO | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    async def init(self) -> None:
        """의존성 초기화."""
        # Redis 연결
        self._redis = build_redis_client(self._settings)
        await self._redis.ping()

        # Infrastructure 생성
        keys = RedisKeyGenerator(self._settings.key_prefix)
        self._site_geo_dao = RedisSiteGeoDAO(
            self._redis,
            keys,
            capacity_threshold=self._settings.capacity_threshold,
            temporary_key_ttl_seconds=self._settings.temporary_key_ttl_seconds,
        )
        self._metric_dao = RedisMetricDAO(
            self._redis,
            keys,
            retention_days=self._settings.metric_retention_days,
        )
        logger.info("Container initialized", extra={"key_prefix": keys.prefix})

    async def close(self) -> None:
        """리소스 정리."""
        if self._redis:
            await self._redis.aclose()
            self._redis = None
        self._site_geo_dao = None
        self._metric_dao = None

    async def __aenter__(self) -> Container:
        try:
            await self.init()
        except BaseException:
            await self.close()
            raise
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    @property
    def redis(self) -> "aioredis.Redis":
        """공유 Redis 클라이언트."""
        if not self._redis:
            raise RuntimeError("Container not initialized")
        return self._redis

    @property
    def site_geo_dao(self) -> RedisSiteGeoDAO:
        """사이트 geo DAO."""
        if not self._site_geo_dao:
            raise RuntimeError("Container not initialized")
        return self._site_geo_dao

    @property
    def metric_dao(self) -> RedisMetricDAO:
        """계측 DAO."""
        if not self._metric_dao:
            raise RuntimeError("Container not initialized")
        return self._metric_dao

    @property
    def get_sites_nearby(self) -> GetSitesNearbyQuery:
        """주변 사이트 조회 Query."""
        return GetSitesNearbyQuery(self.site_geo_dao)

    @property
    def get_site_metrics(self) -> GetSiteMetricsQuery:
        """사이트 계측 리포트 Query."""
        return GetSiteMetricsQuery(self.metric_dao)
