"""Container 테스트."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from redisolar.application.metric.queries import GetSiteMetricsQuery
from redisolar.application.site.queries import GetSitesNearbyQuery
from redisolar.infrastructure.persistence_redis import RedisMetricDAO, RedisSiteGeoDAO
from redisolar.setup.config import Settings
from redisolar.setup.dependencies import Container

BUILD_CLIENT = "redisolar.setup.dependencies.build_redis_client"


@pytest.fixture
def settings() -> Settings:
    return Settings(key_prefix="test:container", capacity_threshold=0.4)


class TestContainer:
    """Container 테스트."""

    def test_properties_before_init(self, settings: Settings) -> None:
        """init() 전에 속성 접근시 RuntimeError."""
        container = Container(settings)

        with pytest.raises(RuntimeError, match="Container not initialized"):
            _ = container.redis

        with pytest.raises(RuntimeError, match="Container not initialized"):
            _ = container.site_geo_dao

        with pytest.raises(RuntimeError, match="Container not initialized"):
            _ = container.get_site_metrics

    @pytest.mark.asyncio
    async def test_init_and_close(self, settings: Settings, mock_redis: MagicMock) -> None:
        with patch(BUILD_CLIENT, return_value=mock_redis) as build:
            container = Container(settings)
            await container.init()

            build.assert_called_once_with(settings)
            mock_redis.ping.assert_awaited_once()
            assert isinstance(container.site_geo_dao, RedisSiteGeoDAO)
            assert isinstance(container.metric_dao, RedisMetricDAO)
            assert isinstance(container.get_sites_nearby, GetSitesNearbyQuery)
            assert isinstance(container.get_site_metrics, GetSiteMetricsQuery)

            await container.close()

        mock_redis.aclose.assert_awaited_once()
        with pytest.raises(RuntimeError):
            _ = container.redis

    @pytest.mark.asyncio
    async def test_async_context_manager(self, settings: Settings, mock_redis: MagicMock) -> None:
        with patch(BUILD_CLIENT, return_value=mock_redis):
            async with Container(settings) as container:
                assert container.redis is mock_redis

        mock_redis.aclose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failed_init_releases_client(
        self,
        settings: Settings,
        mock_redis: MagicMock,
    ) -> None:
        """ping 실패 시에도 연결 정리."""
        mock_redis.ping.side_effect = ConnectionError("refused")

        with patch(BUILD_CLIENT, return_value=mock_redis):
            with pytest.raises(ConnectionError):
                async with Container(settings):
                    pass

        mock_redis.aclose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_without_init(self, settings: Settings) -> None:
        """init() 없이 close() 호출."""
        container = Container(settings)

        await container.close()
