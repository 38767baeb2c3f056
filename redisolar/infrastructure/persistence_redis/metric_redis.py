"""Redis Metric DAO.

MetricGateway 포트의 구현체입니다.

Storage layout:
    {prefix}:metric:{unit}:{YYYY-MM-DD}:{site_id}   ZSET
        member: "{value}:{minute_of_day}"
        score:  minute_of_day

사이트/지표/일(UTC)마다 sorted set 하나에 분 단위 값을 저장하고,
보존 기간(기본 30일) + 1초 뒤 만료됩니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redisolar.domain.entities import Measurement
from redisolar.domain.enums import MetricUnit
from redisolar.domain.exceptions import TooManyMetricsError
from redisolar.domain.services import time_buckets
from redisolar.infrastructure.persistence_redis.errors import translate_store_errors

if TYPE_CHECKING:
    import redis.asyncio as aioredis

    from redisolar.domain.entities import MeterReading
    from redisolar.infrastructure.persistence_redis.key_generator import RedisKeyGenerator

logger = logging.getLogger(__name__)

MAX_METRIC_RETENTION_DAYS = 30


def format_measurement_minute(value: float, minute: int) -> str:
    """sorted set member 생성. 같은 값이라도 분이 다르면 다른 member가 됩니다."""
    return f"{round(value, 2)}:{minute}"


def parse_measurement_minute(member: str) -> tuple[float, int]:
    """member를 (value, minute)로 분리."""
    value, minute = member.rsplit(":", 1)
    return float(value), int(minute)


class RedisMetricDAO:
    """Redis 기반 분 단위 계측 저장소."""

    def __init__(
        self,
        redis: "aioredis.Redis",
        key_generator: "RedisKeyGenerator",
        *,
        retention_days: int = MAX_METRIC_RETENTION_DAYS,
    ) -> None:
        self._redis = redis
        self._keys = key_generator
        self._retention_days = retention_days

    @property
    def max_metric_count(self) -> int:
        """get_recent로 요청할 수 있는 최대 개수."""
        return time_buckets.MINUTES_PER_DAY * self._retention_days

    @property
    def expiration_seconds(self) -> int:
        return time_buckets.DAY_SECONDS * self._retention_days + 1

    @translate_store_errors
    async def insert(self, reading: "MeterReading") -> None:
        """세 지표(whGenerated, whUsed, tempC)를 pipeline 한 번으로 저장."""
        minute = time_buckets.minute_of_day(reading.date_time)

        pipeline = self._redis.pipeline(transaction=False)
        for unit in MetricUnit:
            key = self._keys.day_metric_key(reading.site_id, unit, reading.date_time)
            member = format_measurement_minute(reading.value_for(unit), minute)
            pipeline.zadd(key, {member: minute})
            pipeline.expire(key, self.expiration_seconds)
        await pipeline.execute()

    @translate_store_errors
    async def get_recent(
        self,
        site_id: int,
        unit: MetricUnit,
        timestamp: int,
        limit: int,
    ) -> list[Measurement]:
        """timestamp 이전 최근 limit개 계측값.

        timestamp가 속한 날부터 하루씩 거슬러 올라가며 모자란 개수만큼 채웁니다.
        보존 기간만큼의 날을 다 봤으면 limit보다 적어도 반환합니다.

        Returns:
            오래된 것 → 최신 순 Measurement 목록

        Raises:
            TooManyMetricsError: limit이 보존 기간의 분 수를 초과
        """
        if limit > self.max_metric_count:
            raise TooManyMetricsError(limit, self._retention_days)

        unit = MetricUnit(unit)
        measurements: list[Measurement] = []
        remaining = limit
        current = timestamp
        max_minute: int | str = time_buckets.minute_of_day(timestamp)
        days_scanned = 0

        while remaining > 0 and days_scanned < self._retention_days:
            day_measurements = await self._get_measurements_for_date(
                site_id, unit, current, remaining, max_minute
            )
            measurements[:0] = day_measurements
            remaining -= len(day_measurements)
            days_scanned += 1
            current -= time_buckets.DAY_SECONDS
            max_minute = "+inf"

        logger.debug(
            "Recent metrics loaded",
            extra={
                "site_id": site_id,
                "unit": unit.value,
                "limit": limit,
                "count": len(measurements),
                "days_scanned": days_scanned,
            },
        )
        return measurements

    async def _get_measurements_for_date(
        self,
        site_id: int,
        unit: MetricUnit,
        timestamp: int,
        count: int,
        max_minute: int | str,
    ) -> list[Measurement]:
        """하루치 sorted set에서 max_minute 이하 최신 count개 (시간순)."""
        key = self._keys.day_metric_key(site_id, unit, timestamp)
        entries = await self._redis.zrevrangebyscore(
            key, max_minute, "-inf", start=0, num=count, withscores=True
        )

        measurements: list[Measurement] = []
        for member, _score in reversed(entries):
            value, minute = parse_measurement_minute(member)
            measurements.append(
                Measurement(
                    site_id=site_id,
                    date_time=time_buckets.timestamp_for_minute_of_day(timestamp, minute),
                    value=value,
                    metric_unit=unit,
                )
            )
        return measurements
