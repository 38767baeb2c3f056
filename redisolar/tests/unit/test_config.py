"""Config 테스트."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from redisolar.setup.config import Settings, get_settings


class TestSettings:
    """Settings 테스트."""

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.redis_url == "redis://localhost:6379/0"
        assert settings.key_prefix == "ru102py"
        assert settings.log_level == "INFO"
        assert settings.capacity_threshold == 0.2
        assert settings.temporary_key_ttl_seconds == 30
        assert settings.metric_retention_days == 30

    def test_env_prefix(self) -> None:
        env_vars = {
            "REDISOLAR_REDIS_URL": "redis://prod:6379/2",
            "REDISOLAR_KEY_PREFIX": "prod",
            "REDISOLAR_CAPACITY_THRESHOLD": "0.35",
            "REDISOLAR_LOG_LEVEL": "debug",
        }

        with patch.dict(os.environ, env_vars, clear=True):
            settings = Settings()

        assert settings.redis_url == "redis://prod:6379/2"
        assert settings.key_prefix == "prod"
        assert settings.capacity_threshold == 0.35
        assert settings.log_level == "DEBUG"

    def test_non_positive_ttl_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(temporary_key_ttl_seconds=0)


class TestGetSettings:
    """get_settings 함수 테스트."""

    def setup_method(self) -> None:
        get_settings.cache_clear()

    def teardown_method(self) -> None:
        get_settings.cache_clear()

    def test_get_settings_cached(self) -> None:
        with patch.dict(os.environ, {"REDISOLAR_KEY_PREFIX": "cache-test"}, clear=True):
            settings1 = get_settings()
            settings2 = get_settings()

        assert settings1 is settings2
        assert settings1.key_prefix == "cache-test"
