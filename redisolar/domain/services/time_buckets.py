"""Time Buckets.

계측 데이터를 UTC 일(day) 단위 버킷과 분(minute-of-day) 단위로 나누는
순수 함수 모음입니다. 모든 timestamp는 UNIX seconds 입니다.
"""

from __future__ import annotations

from datetime import datetime, timezone

SECONDS_PER_MINUTE = 60
MINUTES_PER_DAY = 24 * 60
DAY_SECONDS = MINUTES_PER_DAY * SECONDS_PER_MINUTE


def day_start(timestamp: int) -> int:
    """timestamp가 속한 UTC 날짜의 00:00 시각."""
    return timestamp - (timestamp % DAY_SECONDS)


def minute_of_day(timestamp: int) -> int:
    """UTC 기준 하루 중 몇 번째 분인지 (0 ~ 1439)."""
    return (timestamp % DAY_SECONDS) // SECONDS_PER_MINUTE


def timestamp_for_minute_of_day(timestamp: int, minute: int) -> int:
    """timestamp가 속한 날짜의 minute 번째 분 시각."""
    return day_start(timestamp) + minute * SECONDS_PER_MINUTE


def day_string(timestamp: int) -> str:
    """UTC 날짜 문자열 (YYYY-MM-DD)."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d")
