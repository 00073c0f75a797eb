"""Tests for environment-driven settings loading and startup validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from omn_server.config import AppSettings, SettingsLoadError, config_load_settings

_SETTINGS_ENVIRONMENT_NAMES = ("HOST", "PORT", "DB_URL", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Clear settings variables and run from a directory without `.env`.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Empty temporary directory.
    """

    for environment_name in _SETTINGS_ENVIRONMENT_NAMES:
        monkeypatch.delenv(environment_name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_config_load_settings_applies_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Default host, port and log level when only the store address is set.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate defaults.

    Raises:
        AssertionError: Raised when defaults differ.
    """

    monkeypatch.setenv("DB_URL", "db://host/db")

    settings = config_load_settings()

    assert settings.host == "0.0.0.0"
    assert settings.port == 7878
    assert settings.db_url == "db://host/db"
    assert settings.log_level == "INFO"


def test_config_load_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read every supported variable from the environment."""

    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("DB_URL", "db://elsewhere/records")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = config_load_settings()

    assert (settings.host, settings.port, settings.db_url, settings.log_level) == (
        "127.0.0.1",
        9001,
        "db://elsewhere/records",
        "DEBUG",
    )


def test_config_load_settings_reads_dotenv_file(tmp_path: Path) -> None:
    """Read settings from a `.env` file in the working directory."""

    (tmp_path / ".env").write_text("PORT=8080\nDB_URL=db://dotenv/db\n", encoding="utf-8")

    settings = config_load_settings()

    assert settings.port == 8080
    assert settings.db_url == "db://dotenv/db"


def test_config_load_settings_fails_without_store_address() -> None:
    """Fail startup when the store is enabled and `DB_URL` is absent."""

    with pytest.raises(SettingsLoadError, match="DB_URL"):
        config_load_settings()


def test_config_load_settings_treats_blank_store_address_as_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Fail startup for a blank `DB_URL` value."""

    monkeypatch.setenv("DB_URL", "   ")

    with pytest.raises(SettingsLoadError, match="DB_URL"):
        config_load_settings()


def test_config_load_settings_allows_missing_store_address_without_store() -> None:
    """Load settings without `DB_URL` for the configuration-only variant."""

    settings = config_load_settings(store_required=False)

    assert settings.db_url is None
    assert settings.port == 7878


@pytest.mark.parametrize("port_value", ["not-a-port", "65536", "-1", "78.5", "80.0", "1_000", " 80 ", "+80"])
def test_config_load_settings_rejects_invalid_port(monkeypatch: pytest.MonkeyPatch, port_value: str) -> None:
    """Fail startup when `PORT` is not an unsigned 16-bit integer.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        port_value: Invalid raw port value.

    Returns:
        None: Assertions validate startup failure.

    Raises:
        AssertionError: Raised when an invalid port is accepted.
    """

    monkeypatch.setenv("DB_URL", "db://host/db")
    monkeypatch.setenv("PORT", port_value)

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()


def test_config_load_settings_accepts_port_bounds(monkeypatch: pytest.MonkeyPatch) -> None:
    """Accept both ends of the unsigned 16-bit range."""

    monkeypatch.setenv("DB_URL", "db://host/db")
    for port_value in ("0", "65535"):
        monkeypatch.setenv("PORT", port_value)
        assert config_load_settings().port == int(port_value)


def test_config_load_settings_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Fail startup for an unsupported log level name."""

    monkeypatch.setenv("DB_URL", "db://host/db")
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(SettingsLoadError):
        config_load_settings()


def test_config_settings_are_immutable(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reject mutation after construction."""

    monkeypatch.setenv("DB_URL", "db://host/db")
    settings = config_load_settings()

    with pytest.raises(ValidationError):
        settings.port = 1  # type: ignore[misc]


def test_config_load_settings_keeps_store_address_verbatim(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep surrounding whitespace so address validation sees the configured value."""

    monkeypatch.setenv("DB_URL", "  db://host/db")

    assert config_load_settings().db_url == "  db://host/db"
