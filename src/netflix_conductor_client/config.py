"""Configuration for the Conductor client.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

Constructor keyword arguments take priority over both, which is how
applications usually hand settings to :func:`netflix_conductor_client.providers.install`.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConductorSettings(BaseSettings):
    """Settings shared by every Conductor service façade.

    Environment variables:
    - CONDUCTOR_API_ENDPOINT              (e.g. http://localhost:8080/api)
    - CONDUCTOR_REQUEST_TIMEOUT_SECONDS   (optional)
    - LOG_LEVEL                           (optional)

    Notes:
        The endpoint is not required here so that tooling (``--help``, docs builds)
        can construct settings without a server. Each service validates it when
        it is constructed.
    """

    api_endpoint: str = Field(
        default="",
        validation_alias="CONDUCTOR_API_ENDPOINT",
        description="Base URL of the Conductor REST API, including the /api prefix",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        validation_alias="CONDUCTOR_REQUEST_TIMEOUT_SECONDS",
        description="Timeout applied to every HTTP request",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level
