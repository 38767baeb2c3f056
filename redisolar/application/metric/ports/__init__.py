"""Metric Ports."""

from redisolar.application.metric.ports.metric_gateway import MetricGateway

__all__ = ["MetricGateway"]
