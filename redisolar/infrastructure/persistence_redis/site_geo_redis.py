"""Redis Site Geo DAO.

SiteGeoGateway 포트의 구현체입니다.

Storage layout:
    {prefix}:sites:info:{id}        HASH   사이트 필드
    {prefix}:sites:geo              GEO    id → (lng, lat)
    {prefix}:sites:capacity:ranking ZSET   id → 잉여 용량 점수 (외부 관리, 읽기 전용)

Note:
    insert의 hash 쓰기와 geo index 쓰기는 원자적이지 않습니다.
    두 번째 쓰기가 실패해도 롤백하지 않습니다.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from redisolar.domain.enums import GeoUnit
from redisolar.domain.exceptions import (
    CoordinateOutOfGeoRangeError,
    CoordinateRequiredError,
    InvalidRadiusError,
)
from redisolar.infrastructure.persistence_redis.errors import translate_store_errors
from redisolar.infrastructure.persistence_redis.site_codec import SiteHashCodec

if TYPE_CHECKING:
    import redis.asyncio as aioredis

    from redisolar.domain.entities import Site
    from redisolar.infrastructure.persistence_redis.key_generator import RedisKeyGenerator

logger = logging.getLogger(__name__)

# 잉여 용량이 있다고 판단하는 최소 랭킹 점수 (이상, inclusive)
CAPACITY_THRESHOLD = 0.2
TEMPORARY_KEY_TTL_SECONDS = 30

# GEOADD/GEORADIUS가 받는 위도 한계 (EPSG:3857)
GEO_LATITUDE_LIMIT = 85.05112878
GEO_LONGITUDE_LIMIT = 180.0


class RedisSiteGeoDAO:
    """Redis 기반 사이트 geo 저장소.

    SiteGeoGateway 구현체.
    """

    def __init__(
        self,
        redis: "aioredis.Redis",
        key_generator: "RedisKeyGenerator",
        *,
        capacity_threshold: float = CAPACITY_THRESHOLD,
        temporary_key_ttl_seconds: int = TEMPORARY_KEY_TTL_SECONDS,
        codec: SiteHashCodec | None = None,
    ) -> None:
        """Initialize.

        Args:
            redis: Redis 클라이언트
            key_generator: 키 네임스페이스
            capacity_threshold: 잉여 용량 판정 기준 점수
            temporary_key_ttl_seconds: 임시 키 TTL
            codec: Site ↔ hash 변환기
        """
        self._redis = redis
        self._keys = key_generator
        self._capacity_threshold = capacity_threshold
        self._temporary_key_ttl = temporary_key_ttl_seconds
        self._codec = codec or SiteHashCodec()

    @translate_store_errors
    async def insert(self, site: "Site") -> str:
        """사이트 저장.

        hash를 먼저 쓰고 geo index에 추가합니다.

        Returns:
            사이트 hash 키

        Raises:
            CoordinateRequiredError: 좌표 누락 (아무것도 쓰지 않음)
            CoordinateOutOfGeoRangeError: geo index 범위 밖 좌표 (아무것도 쓰지 않음)
        """
        if not site.has_coordinate:
            raise CoordinateRequiredError(site.id)
        _check_geo_range(site.coordinate.lat, site.coordinate.lng)

        site_hash_key = self._keys.site_hash_key(site.id)

        await self._redis.hset(site_hash_key, mapping=self._codec.encode(site))
        await self._redis.geoadd(
            self._keys.site_geo_key(),
            [site.coordinate.lng, site.coordinate.lat, site.id],
        )

        logger.debug("Site inserted", extra={"site_id": site.id, "key": site_hash_key})
        return site_hash_key

    @translate_store_errors
    async def find_by_id(self, site_id: int) -> "Site | None":
        """ID로 사이트 조회. 없으면 None."""
        site_hash = await self._redis.hgetall(self._keys.site_hash_key(site_id))
        return self._codec.decode(site_hash)

    @translate_store_errors
    async def find_all(self) -> list["Site"]:
        """geo index에 등록된 모든 사이트를 조회합니다.

        hash 조회는 pipeline 한 번(왕복 1회)으로 처리합니다.
        """
        site_ids = await self._redis.zrange(self._keys.site_geo_key(), 0, -1)
        return await self._load_sites(site_ids)

    @translate_store_errors
    async def find_by_geo(
        self,
        lat: float,
        lng: float,
        radius: float,
        unit: GeoUnit | str,
    ) -> list["Site"]:
        """(lat, lng)에서 radius 이내의 사이트 조회.

        Args:
            lat: 중심 위도
            lng: 중심 경도
            radius: 반경
            unit: 반경 단위 (km, mi / 대소문자 무관)

        Raises:
            InvalidRadiusError: 음수 반경
            CoordinateOutOfGeoRangeError: 중심 좌표가 geo index 범위 밖
        """
        geo_unit = _check_search(lat, lng, radius, unit)
        site_ids = await self._redis.georadius(
            self._keys.site_geo_key(), lng, lat, radius, unit=geo_unit.value
        )
        return await self._load_sites(site_ids)

    @translate_store_errors
    async def find_by_geo_with_excess_capacity(
        self,
        lat: float,
        lng: float,
        radius: float,
        unit: GeoUnit | str,
    ) -> list["Site"]:
        """반경 내에서 잉여 용량 점수가 기준 이상인 사이트 조회.

        Workflow:
            1. 호출마다 새 임시 키 2개 할당
            2. pipeline (MULTI/EXEC, 왕복 1회):
               - GEORADIUS ... STORE tmp1       (반경 내 사이트)
               - ZINTERSTORE tmp2 tmp1 ranking WEIGHTS 0 1
                 (tmp1은 필터 역할만, 점수는 랭킹 점수 그대로)
               - EXPIRE tmp1, tmp2
            3. ZRANGEBYSCORE tmp2 threshold +inf
            4. 선택된 id의 hash 조회

        임시 키는 TTL 만료로만 정리됩니다.
        """
        geo_unit = _check_search(lat, lng, radius, unit)

        sites_in_radius_key = self._keys.temporary_key()
        sites_in_radius_capacity_key = self._keys.temporary_key()

        pipeline = self._redis.pipeline()
        pipeline.georadius(
            self._keys.site_geo_key(),
            lng,
            lat,
            radius,
            unit=geo_unit.value,
            store=sites_in_radius_key,
        )
        pipeline.zinterstore(
            sites_in_radius_capacity_key,
            {sites_in_radius_key: 0, self._keys.capacity_ranking_key(): 1},
        )
        pipeline.expire(sites_in_radius_key, self._temporary_key_ttl)
        pipeline.expire(sites_in_radius_capacity_key, self._temporary_key_ttl)
        await pipeline.execute()

        site_ids = await self._redis.zrangebyscore(
            sites_in_radius_capacity_key, self._capacity_threshold, "+inf"
        )
        logger.debug(
            "Excess capacity search",
            extra={
                "radius": radius,
                "unit": geo_unit.value,
                "matches": len(site_ids),
            },
        )
        return await self._load_sites(site_ids)

    async def _load_sites(self, site_ids: Iterable[int | str]) -> list["Site"]:
        """id 목록의 hash를 한 번의 pipeline으로 읽어 Site로 변환.

        hash가 없는 id(geo index와 hash 불일치)는 건너뜁니다.
        """
        site_ids = list(site_ids)
        if not site_ids:
            return []

        pipeline = self._redis.pipeline(transaction=False)
        for site_id in site_ids:
            pipeline.hgetall(self._keys.site_hash_key(site_id))
        site_hashes = await pipeline.execute()

        sites: list["Site"] = []
        for site_id, site_hash in zip(site_ids, site_hashes):
            site = self._codec.decode(site_hash)
            if site is None:
                logger.debug("Site hash missing for indexed id", extra={"site_id": site_id})
                continue
            sites.append(site)
        return sites


def _check_geo_range(lat: float, lng: float) -> None:
    if abs(lat) > GEO_LATITUDE_LIMIT or abs(lng) > GEO_LONGITUDE_LIMIT:
        raise CoordinateOutOfGeoRangeError(lat, lng)


def _check_search(lat: float, lng: float, radius: float, unit: GeoUnit | str) -> GeoUnit:
    """검색 입력 검증. Redis 호출 전에 입력 오류를 ValidationError로 구분합니다."""
    geo_unit = GeoUnit.parse(unit)
    if radius < 0:
        raise InvalidRadiusError(radius)
    _check_geo_range(lat, lng)
    return geo_unit
