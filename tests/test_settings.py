"""Unit tests for environment-driven server settings."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from tools.settings import ServerSettings, load_settings

ENV_VARS = ("TOOLS_TRANSPORT", "HOST", "PORT", "LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


class TestLoadSettings:
    def test_defaults(self, clean_env):
        settings = load_settings()
        assert settings.transport == "stdio"
        assert settings.host == "127.0.0.1"
        assert settings.port == 3000
        assert settings.log_level == "INFO"

    def test_http(self, clean_env):
        clean_env.setenv("TOOLS_TRANSPORT", "HTTP")
        clean_env.setenv("HOST", "0.0.0.0")
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("LOG_LEVEL", "debug")
        settings = load_settings()
        assert settings.transport == "http"
        assert settings.host == "0.0.0.0"
        assert settings.port == 8080
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "var, value",
        [
            ("TOOLS_TRANSPORT", "sse"),
            ("PORT", "abc"),
            ("PORT", "0"),
            ("PORT", "70000"),
            ("LOG_LEVEL", "chatty"),
        ],
    )
    def test_invalid_values(self, clean_env, var, value):
        clean_env.setenv(var, value)
        with pytest.raises(ValidationError):
            load_settings()

    def test_unrelated_variables_ignored(self, clean_env):
        clean_env.setenv("UNRELATED_SETTING", "x")
        assert load_settings().port == 3000

    def test_frozen(self, clean_env):
        settings = ServerSettings()
        with pytest.raises(ValidationError):
            settings.port = 1
