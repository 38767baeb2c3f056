"""Site Hash Codec.

Site 도메인 객체 ↔ Redis hash(평평한 문자열 필드 맵) 변환.
Redis는 hash 값을 모두 문자열로 저장하므로 읽을 때 스키마의 타입으로 다시 파싱합니다.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from redisolar.domain.entities import Site
from redisolar.domain.value_objects import Coordinate

# field name → type tag
SITE_HASH_SCHEMA: dict[str, Callable[[str], Any]] = {
    "id": int,
    "panels": int,
    "capacity": float,
    "lat": float,
    "lng": float,
    "address": str,
    "city": str,
    "state": str,
    "postal_code": str,
}


class SiteHashCodec:
    """Site ↔ flat hash 매핑."""

    def __init__(self, schema: Mapping[str, Callable[[str], Any]] = SITE_HASH_SCHEMA) -> None:
        self._schema = schema

    def encode(self, site: Site) -> dict[str, str]:
        """Site를 중첩 없는 문자열 필드 맵으로 변환.

        coordinate는 lat/lng 필드로 펼치고, 값이 없는 선택 필드는 생략합니다.
        """
        fields: dict[str, Any] = {
            "id": site.id,
            "panels": site.panels,
            "capacity": site.capacity,
            "address": site.address,
            "city": site.city,
            "state": site.state,
            "postal_code": site.postal_code,
        }
        if site.coordinate is not None:
            fields["lat"] = site.coordinate.lat
            fields["lng"] = site.coordinate.lng

        return {name: _render(value) for name, value in fields.items() if value is not None}

    def decode(self, flat: Mapping[str, str] | None) -> Site | None:
        """hash 필드 맵을 Site로 변환.

        Args:
            flat: HGETALL 결과

        Returns:
            Site, 또는 hash가 없으면(None/빈 dict) None
        """
        if not flat:
            return None

        values: dict[str, Any] = {}
        for name, raw in flat.items():
            cast = self._schema.get(name)
            if cast is None:
                continue
            values[name] = cast(raw)

        lat = values.pop("lat", None)
        lng = values.pop("lng", None)
        coordinate = Coordinate(lat=lat, lng=lng) if lat is not None and lng is not None else None

        return Site(coordinate=coordinate, **values)


def _render(value: Any) -> str:
    # repr keeps floats exact across the string round trip
    if isinstance(value, float):
        return repr(value)
    return str(value)
