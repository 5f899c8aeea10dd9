"""Tests for runtime settings loading and startup validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from app.config import SettingsLoadError, config_load_settings

_SETTINGS_ENV_NAMES = ("SERVICE_TITLE", "APPLICATION_HOST", "APPLICATION_PORT", "LOG_LEVEL")


@pytest.fixture(name="clean_settings_env")
def fixture_clean_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    """Isolate settings loading from host environment and dotenv files.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Empty working directory without a `.env` file.

    Returns:
        pytest.MonkeyPatch: Fixture instance for further environment edits.
    """

    monkeypatch.chdir(tmp_path)
    for env_name in _SETTINGS_ENV_NAMES:
        monkeypatch.delenv(env_name, raising=False)
    return monkeypatch


def test_config_load_settings_uses_defaults(clean_settings_env: pytest.MonkeyPatch) -> None:
    """Load defaults when no runtime settings are provided.

    Args:
        clean_settings_env: Isolated environment fixture.

    Returns:
        None: Assertions validate default values.

    Raises:
        AssertionError: Raised when defaults differ.
    """

    _ = clean_settings_env
    settings = config_load_settings()

    assert settings.service_title == "Environment Info Service"
    assert settings.application_host == "0.0.0.0"
    assert settings.application_port == 8000
    assert settings.log_level == "INFO"


def test_config_load_settings_reads_environment_and_normalizes_level(
    clean_settings_env: pytest.MonkeyPatch,
) -> None:
    """Read overrides from environment and upper-case the log level."""

    clean_settings_env.setenv("APPLICATION_PORT", "9090")
    clean_settings_env.setenv("log_level", " debug ")

    settings = config_load_settings()

    assert settings.application_port == 9090
    assert settings.log_level == "DEBUG"


def test_config_load_settings_reads_dotenv_file(clean_settings_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Read overrides from a `.env` file in the working directory."""

    _ = clean_settings_env
    (tmp_path / ".env").write_text("SERVICE_TITLE=Dotenv Title\n", encoding="utf-8")

    assert config_load_settings().service_title == "Dotenv Title"


@pytest.mark.parametrize(
    ("env_name", "env_value"),
    [
        ("APPLICATION_PORT", "0"),
        ("APPLICATION_PORT", "70000"),
        ("LOG_LEVEL", "verbose"),
        ("APPLICATION_HOST", "   "),
    ],
)
def test_config_load_settings_rejects_invalid_values(
    clean_settings_env: pytest.MonkeyPatch,
    env_name: str,
    env_value: str,
) -> None:
    """Wrap validation failures in SettingsLoadError.

    Args:
        clean_settings_env: Isolated environment fixture.
        env_name: Setting variable to override.
        env_value: Invalid value.

    Returns:
        None: Assertions validate error wrapping.

    Raises:
        AssertionError: Raised when invalid settings are accepted.
    """

    clean_settings_env.setenv(env_name, env_value)

    with pytest.raises(SettingsLoadError):
        config_load_settings()
