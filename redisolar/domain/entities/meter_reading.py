"""Meter Reading / Measurement Entities."""

from __future__ import annotations

from dataclasses import dataclass

from redisolar.domain.enums import MetricUnit


@dataclass(frozen=True)
class MeterReading:
    """분 단위 계측값.

    Attributes:
        site_id: 사이트 ID
        date_time: 계측 시각 (UNIX seconds, UTC)
        wh_used: 소비 전력량 (Wh)
        wh_generated: 발전 전력량 (Wh)
        temp_c: 온도 (섭씨)
    """

    site_id: int
    date_time: int
    wh_used: float
    wh_generated: float
    temp_c: float

    def value_for(self, unit: MetricUnit) -> float:
        """단위에 해당하는 계측값 반환."""
        if unit is MetricUnit.WH_GENERATED:
            return self.wh_generated
        if unit is MetricUnit.WH_USED:
            return self.wh_used
        return self.temp_c


@dataclass(frozen=True)
class Measurement:
    """단일 지표의 조회 결과."""

    site_id: int
    date_time: int
    value: float
    metric_unit: MetricUnit
