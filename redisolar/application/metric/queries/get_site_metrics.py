"""Get Site Metrics Query.

사이트의 발전량/소비량 최근 시계열을 조회합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redisolar.application.metric.dto import MetricSeries
from redisolar.domain.enums import MetricUnit

if TYPE_CHECKING:
    from redisolar.application.metric.ports import MetricGateway

logger = logging.getLogger(__name__)

SERIES_NAMES: dict[MetricUnit, str] = {
    MetricUnit.WH_GENERATED: "Watt-Hours Generated",
    MetricUnit.WH_USED: "Watt-Hours Used",
}


class GetSiteMetricsQuery:
    """사이트 계측 리포트 Query."""

    def __init__(self, metric_gateway: "MetricGateway") -> None:
        self._metrics = metric_gateway

    async def execute(self, site_id: int, timestamp: int, limit: int) -> list[MetricSeries]:
        """발전량, 소비량 순서로 시계열을 반환합니다."""
        series: list[MetricSeries] = []
        for unit, name in SERIES_NAMES.items():
            measurements = await self._metrics.get_recent(site_id, unit, timestamp, limit)
            series.append(MetricSeries(name=name, measurements=measurements))

        logger.info(
            "Site metrics loaded",
            extra={
                "site_id": site_id,
                "limit": limit,
                "counts": [len(s.measurements) for s in series],
            },
        )
        return series
