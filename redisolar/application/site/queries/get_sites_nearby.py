"""Get Sites Nearby Query.

주변 사이트를 조회하는 Query입니다.
잉여 용량 필터 여부에 따라 Gateway의 검색 메서드를 선택합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redisolar.domain.enums import GeoUnit
from redisolar.domain.exceptions import InvalidRadiusError

if TYPE_CHECKING:
    from redisolar.application.site.dto import NearbySitesRequest
    from redisolar.application.site.ports import SiteGeoGateway
    from redisolar.domain.entities import Site

logger = logging.getLogger(__name__)


class GetSitesNearbyQuery:
    """주변 사이트 조회 Query.

    Workflow:
        1. 단위/반경 검증
        2. 반경 검색 (잉여 용량 필터 선택)
    """

    def __init__(self, site_gateway: "SiteGeoGateway") -> None:
        """Initialize.

        Args:
            site_gateway: 사이트 geo 저장소 Port
        """
        self._sites = site_gateway

    async def execute(self, request: "NearbySitesRequest") -> list["Site"]:
        """주변 사이트를 조회합니다.

        Raises:
            InvalidGeoUnitError: 지원하지 않는 단위
            InvalidRadiusError: 음수 반경
        """
        unit = GeoUnit.parse(request.unit)
        if request.radius < 0:
            raise InvalidRadiusError(request.radius)

        logger.info(
            "Site search started",
            extra={
                "lat": request.latitude,
                "lng": request.longitude,
                "radius": request.radius,
                "unit": unit.value,
                "only_excess_capacity": request.only_excess_capacity,
            },
        )

        if request.only_excess_capacity:
            sites = await self._sites.find_by_geo_with_excess_capacity(
                request.latitude, request.longitude, request.radius, unit
            )
        else:
            sites = await self._sites.find_by_geo(
                request.latitude, request.longitude, request.radius, unit
            )

        logger.info("Site search completed", extra={"results_count": len(sites)})
        return sites
