"""Unit tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from netflix_conductor_client.config import ConductorSettings


@pytest.fixture(autouse=True)
def _clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("CONDUCTOR_API_ENDPOINT", "CONDUCTOR_REQUEST_TIMEOUT_SECONDS", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


def test_settings_defaults() -> None:
    settings = ConductorSettings()

    assert settings.api_endpoint == ""
    assert settings.request_timeout_seconds == 30.0
    assert settings.log_level == "INFO"


def test_settings_loads_from_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "\n".join(
            [
                "CONDUCTOR_API_ENDPOINT=http://localhost:8080/api",
                "CONDUCTOR_REQUEST_TIMEOUT_SECONDS=5",
                "LOG_LEVEL=DEBUG",
                "",
            ]
        ),
        encoding="utf-8",
    )

    settings = ConductorSettings()

    assert settings.api_endpoint == "http://localhost:8080/api"
    assert settings.request_timeout_seconds == 5.0
    assert settings.log_level == "DEBUG"


def test_environment_overrides_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("CONDUCTOR_API_ENDPOINT=http://from-file/api\n", encoding="utf-8")
    monkeypatch.setenv("CONDUCTOR_API_ENDPOINT", "http://from-env/api")

    assert ConductorSettings().api_endpoint == "http://from-env/api"


def test_constructor_arguments_take_priority(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONDUCTOR_API_ENDPOINT", "http://from-env/api")

    settings = ConductorSettings(api_endpoint="http://explicit/api")

    assert settings.api_endpoint == "http://explicit/api"


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        ConductorSettings(request_timeout_seconds=0)


def test_log_level_is_normalized() -> None:
    assert ConductorSettings(log_level=" debug ").log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError, match="Unknown log level"):
        ConductorSettings()
