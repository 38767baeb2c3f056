"""Site Entity."""

from __future__ import annotations

from dataclasses import dataclass

from redisolar.domain.value_objects import Coordinate


@dataclass(frozen=True)
class Site:
    """태양광 발전 사이트.

    id는 호출자가 부여합니다 (DAO가 생성하지 않음).
    coordinate는 조회 시 선택이지만, geo DAO에 저장할 때는 필수입니다.

    Attributes:
        id: 사이트 고유 ID (양의 정수)
        panels: 설치된 패널 수
        capacity: 발전 용량
        coordinate: 위치 (선택)
        address: 주소 (선택)
        city: 도시 (선택)
        state: 주 (선택)
        postal_code: 우편번호 (선택)
    """

    id: int
    panels: int
    capacity: float
    coordinate: Coordinate | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None

    @property
    def has_coordinate(self) -> bool:
        return self.coordinate is not None
