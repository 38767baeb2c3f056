"""SiteGeoGateway Port.

위치 정보를 포함한 사이트 저장소 인터페이스입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from redisolar.domain.entities import Site
    from redisolar.domain.enums import GeoUnit


class SiteGeoGateway(Protocol):
    """사이트 geo 저장소 인터페이스.

    구현체:
        - RedisSiteGeoDAO (infrastructure/persistence_redis/)
    """

    async def insert(self, site: "Site") -> str:
        """사이트 저장.

        Args:
            site: 좌표가 있는 사이트

        Returns:
            저장에 사용한 키

        Raises:
            ValidationError: 좌표 누락 또는 geo index 범위 밖 좌표
        """
        ...

    async def find_by_id(self, site_id: int) -> "Site | None":
        """ID로 조회. 없으면 None."""
        ...

    async def find_all(self) -> list["Site"]:
        """전체 사이트 조회."""
        ...

    async def find_by_geo(
        self,
        lat: float,
        lng: float,
        radius: float,
        unit: "GeoUnit | str",
    ) -> list["Site"]:
        """반경 내 사이트 조회."""
        ...

    async def find_by_geo_with_excess_capacity(
        self,
        lat: float,
        lng: float,
        radius: float,
        unit: "GeoUnit | str",
    ) -> list["Site"]:
        """반경 내에서 잉여 발전 용량이 있는 사이트 조회."""
        ...
