"""Metric DTOs."""

from redisolar.application.metric.dto.metric_series import MetricSeries

__all__ = ["MetricSeries"]
