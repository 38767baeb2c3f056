"""검증 관련 예외.

입력을 고쳐서 다시 호출해야 하며, 자동 재시도 대상이 아닙니다.
"""

from redisolar.domain.exceptions.base import DomainError


class ValidationError(DomainError):
    """입력 검증 실패."""

    def __init__(self, message: str = "Validation failed") -> None:
        super().__init__(message)


class CoordinateRequiredError(ValidationError):
    """geo 저장소에 좌표 없는 사이트를 저장하려 함."""

    def __init__(self, site_id: int) -> None:
        self.site_id = site_id
        super().__init__(f"Coordinate required for site geo insert (site {site_id})")


class InvalidGeoUnitError(ValidationError):
    """지원하지 않는 거리 단위."""

    def __init__(self, value: str, allowed: list[str]) -> None:
        super().__init__(f"Invalid radius unit '{value}'. Allowed values: {allowed}.")


class InvalidRadiusError(ValidationError):
    """음수 반경."""

    def __init__(self, radius: float) -> None:
        super().__init__(f"Radius must not be negative: {radius}")


class CoordinateOutOfGeoRangeError(ValidationError):
    """geo index가 표현할 수 없는 좌표 (Web Mercator 위도 한계 밖)."""

    def __init__(self, lat: float, lng: float) -> None:
        self.lat = lat
        self.lng = lng
        super().__init__(f"Coordinate out of geo index range: lat={lat}, lng={lng}")
