"""Logging Configuration.

ECS JSON 포맷으로 stdout에 기록합니다.
모든 레코드에 service 메타데이터(name, version, environment)가 붙습니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import ecs_logging

from redisolar.setup.config import Settings, get_settings

# DEBUG 레벨에서 명령 단위로 로그를 쏟아내는 라이브러리
NOISY_LOGGERS = ("redis", "testcontainers")

# setup_logging을 여러 번 불러도 factory가 중첩되지 않도록 최초 factory를 기준으로 감쌉니다.
_base_record_factory = logging.getLogRecordFactory()


def _service_metadata(settings: Settings) -> dict[str, str]:
    return {
        "name": settings.service_name,
        "version": settings.service_version,
        "environment": settings.environment,
    }


def setup_logging(settings: Settings | None = None) -> None:
    """루트 로거에 ECS 핸들러를 설치합니다.

    Args:
        settings: 생략하면 get_settings() 사용
    """
    settings = settings or get_settings()
    service = _service_metadata(settings)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ecs_logging.StdlibFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(settings.log_level)

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = _base_record_factory(*args, **kwargs)
        record.service = dict(service)
        return record

    logging.setLogRecordFactory(record_factory)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
