"""Application Settings.

환경변수 기반 설정입니다.
env_prefix="REDISOLAR_" 사용: REDISOLAR_REDIS_URL → redis_url
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """RediSolar 설정."""

    # Service
    service_name: str = "redisolar"
    service_version: str = "1.0.0"
    environment: str = "local"

    # Logging
    log_level: str = "INFO"

    # Redis
    redis_url: str = "redis://localhost:6379/0"
    key_prefix: str = "ru102py"
    redis_max_connections: int = 50
    redis_socket_timeout: float = 5.0  # seconds
    redis_socket_connect_timeout: float = 5.0  # seconds
    redis_max_retries: int = 3

    # Site geo
    capacity_threshold: float = 0.2
    temporary_key_ttl_seconds: int = Field(default=30, gt=0)

    # Metrics
    metric_retention_days: int = Field(default=30, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="REDISOLAR_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        """로그 레벨은 대문자로 정규화."""
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환."""
    return Settings()
