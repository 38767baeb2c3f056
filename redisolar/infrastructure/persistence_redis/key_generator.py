"""Redis Key 네이밍 규칙.

모든 키는 prefix로 시작합니다. 테스트는 prefix를 바꿔 키 공간을 격리합니다.

    {prefix}:sites:info:{site_id}            사이트 hash
    {prefix}:sites:geo                       사이트 geo index
    {prefix}:sites:capacity:ranking          잉여 용량 랭킹 (외부 관리)
    {prefix}:metric:{unit}:{YYYY-MM-DD}:{id} 일별 계측 sorted set
    {prefix}:tmp:{uuid}                      임시 키
"""

from __future__ import annotations

from uuid import uuid4

from redisolar.domain.enums import MetricUnit
from redisolar.domain.services import time_buckets

DEFAULT_KEY_PREFIX = "ru102py"


class RedisKeyGenerator:
    """Redis Key 네임스페이스 관리."""

    def __init__(self, prefix: str = DEFAULT_KEY_PREFIX) -> None:
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    def _key(self, suffix: str) -> str:
        return f"{self._prefix}:{suffix}"

    def site_hash_key(self, site_id: int | str) -> str:
        return self._key(f"sites:info:{site_id}")

    def site_geo_key(self) -> str:
        return self._key("sites:geo")

    def capacity_ranking_key(self) -> str:
        return self._key("sites:capacity:ranking")

    def day_metric_key(self, site_id: int, unit: MetricUnit | str, timestamp: int) -> str:
        """일별 계측 키.

        Args:
            site_id: 사이트 ID
            unit: 지표
            timestamp: 해당 날짜에 속한 임의의 시각 (UNIX seconds)
        """
        unit_value = MetricUnit(unit).value
        return self._key(f"metric:{unit_value}:{time_buckets.day_string(timestamp)}:{site_id}")

    def temporary_key(self) -> str:
        """호출마다 새로운 임시 키. 동시 호출 간에도 충돌하지 않습니다."""
        return self._key(f"tmp:{uuid4().hex}")
