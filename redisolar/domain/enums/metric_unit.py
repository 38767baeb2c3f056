"""Metric Unit Enum."""

from enum import Enum


class MetricUnit(str, Enum):
    """저장되는 계측 지표. 값은 Redis 키에 그대로 사용됩니다."""

    WH_GENERATED = "whGenerated"
    WH_USED = "whUsed"
    TEMPERATURE_CELSIUS = "tempC"
