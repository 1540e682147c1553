# =============================================================================
# tools/settings.py  -  Server Configuration
# =============================================================================
#
# All settings come from environment variables via pydantic-settings.
# main.py calls load_dotenv() first, so a local .env file works too.
#
#   TOOLS_TRANSPORT   "stdio" (default) or "http"
#   HOST              bind address for http            (default 127.0.0.1)
#   PORT              port for http                    (default 3000)
#   LOG_LEVEL         DEBUG, INFO, WARNING, ...        (default INFO)
# =============================================================================

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """Resolved settings for one server process."""

    model_config = SettingsConfigDict(env_file=None, extra="ignore", frozen=True)

    transport: Literal["stdio", "http"] = Field(default="stdio", validation_alias="TOOLS_TRANSPORT")
    host: str = Field(default="127.0.0.1", validation_alias="HOST")
    port: int = Field(default=3000, gt=0, lt=65536, validation_alias="PORT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @field_validator("transport", mode="before")
    @classmethod
    def _normalize_transport(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"not a logging level: {value!r}")
        return level


def load_settings() -> ServerSettings:
    """Read ServerSettings from the process environment.

    Raises:
        pydantic.ValidationError: An unknown transport, a non-numeric or
            out-of-range port, or an unknown log level.
    """
    return ServerSettings()
