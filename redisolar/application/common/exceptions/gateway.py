"""Store Gateway Exceptions."""

from redisolar.application.common.exceptions.base import ApplicationError


class StoreUnavailableError(ApplicationError):
    """저장소 통신 실패.

    네트워크 장애, 명령 오류 등 Redis 연결에서 올라온 모든 실패입니다.
    DAO는 재시도하지 않고 그대로 호출자에게 전달합니다.
    """

    def __init__(self, reason: str = "Store unavailable") -> None:
        super().__init__(reason)
