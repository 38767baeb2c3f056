"""Nearby Sites Request DTO."""

from __future__ import annotations

from dataclasses import dataclass

from redisolar.domain.enums import GeoUnit


@dataclass(frozen=True)
class NearbySitesRequest:
    """반경 검색 요청.

    Attributes:
        latitude: 검색 중심 위도
        longitude: 검색 중심 경도
        radius: 검색 반경
        unit: 반경 단위 ("KM", "mi" 등 대소문자 무관)
        only_excess_capacity: 잉여 용량 사이트만 조회할지 여부
    """

    latitude: float
    longitude: float
    radius: float
    unit: GeoUnit | str = GeoUnit.KILOMETERS
    only_excess_capacity: bool = False
