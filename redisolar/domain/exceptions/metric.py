"""Metric 도메인 예외."""

from redisolar.domain.exceptions.base import DomainError


class TooManyMetricsError(DomainError):
    """보존 기간을 넘는 분 단위 데이터 요청."""

    def __init__(self, limit: int, retention_days: int) -> None:
        self.limit = limit
        self.retention_days = retention_days
        super().__init__(
            f"Cannot request more than {retention_days} days of minute level data "
            f"(requested {limit})."
        )
