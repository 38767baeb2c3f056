"""Coordinate Value Object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """위경도 좌표 (단위: 도).

    Attributes:
        lat: 위도 (-90 ~ 90)
        lng: 경도 (-180 ~ 180)
    """

    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not -90 <= self.lat <= 90:
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not -180 <= self.lng <= 180:
            raise ValueError(f"Invalid longitude: {self.lng}")
