"""MetricGateway Port.

분 단위 계측 데이터 저장소 인터페이스입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from redisolar.domain.entities import Measurement, MeterReading
    from redisolar.domain.enums import MetricUnit


class MetricGateway(Protocol):
    """계측 데이터 저장소 인터페이스.

    구현체:
        - RedisMetricDAO (infrastructure/persistence_redis/)
    """

    async def insert(self, reading: "MeterReading") -> None:
        """계측값 저장 (whGenerated, whUsed, tempC)."""
        ...

    async def get_recent(
        self,
        site_id: int,
        unit: "MetricUnit",
        timestamp: int,
        limit: int,
    ) -> list["Measurement"]:
        """timestamp 이전 최근 limit개 계측값 조회.

        Args:
            site_id: 사이트 ID
            unit: 지표
            timestamp: 기준 시각 (UNIX seconds)
            limit: 최대 개수

        Returns:
            오래된 것부터 최신 순으로 정렬된 Measurement 목록

        Raises:
            TooManyMetricsError: 보존 기간을 넘는 요청
        """
        ...
