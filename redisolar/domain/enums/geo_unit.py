"""Geo Unit Enum."""

from __future__ import annotations

from enum import Enum

from redisolar.domain.exceptions import InvalidGeoUnitError


class GeoUnit(str, Enum):
    """반경 검색 거리 단위. 값은 Redis GEO 명령의 unit 인자입니다."""

    KILOMETERS = "km"
    MILES = "mi"

    @classmethod
    def parse(cls, value: str | GeoUnit) -> GeoUnit:
        """대소문자 구분 없이 단위를 해석합니다.

        Args:
            value: "KM", "mi", GeoUnit.MILES 등

        Raises:
            InvalidGeoUnitError: 지원하지 않는 단위
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidGeoUnitError(str(value), [unit.value for unit in cls]) from None
