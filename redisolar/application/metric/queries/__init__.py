"""Metric Queries."""

from redisolar.application.metric.queries.get_site_metrics import GetSiteMetricsQuery

__all__ = ["GetSiteMetricsQuery"]
