"""
Central application configuration using pydantic-settings.

This module provides typed access to environment-based configuration for
the HTTP server. Database configuration lives in `tictactoe.data.config.DatabaseSettings`.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """
    Configuration for the API server.

    Environment variables (prefix: SERVER_):
        SERVER_HOST        - Bind address (default: 0.0.0.0)
        SERVER_PORT        - Bind port (default: 8000)
        SERVER_LOG_LEVEL   - Root log level (default: INFO)
        SERVER_ENABLE_DOCS - Serve Swagger UI and the OpenAPI schema (default: true)
        SERVER_TITLE       - Title shown in the OpenAPI docs
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="SERVER_",
    )

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    enable_docs: bool = Field(default=True)
    title: str = Field(default="Tic-Tac-Toe API")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Accept any case and reject names logging does not know."""
        level = str(value).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_server_settings() -> ServerSettings:
    """Return cached server settings instance."""
    return ServerSettings()
