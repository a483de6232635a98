"""Tests for settings loading."""

import pytest
from api.config import Settings, get_settings

pytestmark = pytest.mark.unit


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.app_name == "user-registry"
    assert settings.api_port == 8000
    assert settings.environment == "development"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("api_port", "9000")

    settings = get_settings()

    assert settings.environment == "production"
    assert settings.api_port == 9000


def test_env_file_values(tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_LEVEL=debug\nUNRELATED_KEY=ignored\n", encoding="utf-8")

    settings = Settings(_env_file=env_file)

    assert settings.log_level == "debug"
