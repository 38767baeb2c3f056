"""Metric Series DTO."""

from __future__ import annotations

from dataclasses import dataclass, field

from redisolar.domain.entities import Measurement


@dataclass(frozen=True)
class MetricSeries:
    """이름이 붙은 계측값 시계열."""

    name: str
    measurements: list[Measurement] = field(default_factory=list)
