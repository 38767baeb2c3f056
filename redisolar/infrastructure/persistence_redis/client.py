"""Redis Client Provider.

애플리케이션 전체가 공유하는 단일 비동기 Redis 클라이언트를 생성합니다.
생성된 클라이언트의 수명(열기/닫기)은 호출자(Container)가 관리합니다.

Retry 설정:
    - ExponentialBackoff: 지수 백오프 재시도 (연결 계층)
    - ConnectionError, TimeoutError에서만 재시도
    - DAO 계층은 재시도하지 않습니다
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import redis.asyncio as aioredis
from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError, TimeoutError

if TYPE_CHECKING:
    from redisolar.setup.config import Settings

HEALTH_CHECK_INTERVAL = 30  # seconds
RETRY_ON_ERROR = [ConnectionError, TimeoutError]


def build_redis_client(settings: "Settings") -> aioredis.Redis:
    """비동기 Redis 클라이언트 생성.

    Key configurations:
    - decode_responses: 모든 응답을 str로 디코딩 (hash 값은 문자열)
    - retry: 일시적 장애 시 자동 재연결
    - health_check_interval: 주기적 연결 검증
    - max_connections: 연결 풀 크기 제한
    """
    retry = Retry(ExponentialBackoff(), retries=settings.redis_max_retries)

    return aioredis.from_url(
        settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
        # Health & Keepalive
        health_check_interval=HEALTH_CHECK_INTERVAL,
        socket_keepalive=True,
        # Timeouts
        socket_connect_timeout=settings.redis_socket_connect_timeout,
        socket_timeout=settings.redis_socket_timeout,
        # Connection Pool
        max_connections=settings.redis_max_connections,
        # Retry on transient errors
        retry=retry,
        retry_on_error=RETRY_ON_ERROR,
    )
