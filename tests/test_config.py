"""Tests for configuration module."""

import os
from pathlib import Path

import pytest

from mimetable.config import Config, Settings


@pytest.fixture
def mime_file(tmp_path: Path) -> Path:
    mime_file = tmp_path / "mime.types"
    mime_file.write_text("text/html html htm\nimage/png png\n")
    return mime_file


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove MIMETABLE_* variables inherited from the environment."""
    for key in list(os.environ):
        if key.startswith("MIMETABLE_"):
            monkeypatch.delenv(key)


def test_settings_defaults() -> None:
    settings = Settings.from_env()

    assert settings.mime_file == "/etc/mime.types"
    assert settings.default_charset == "utf-8"
    assert settings.fallback_type == "application/octet-stream"
    assert settings.max_token_size == 64 * 1024
    assert settings.transport == "http"
    assert settings.http_port == 8000
    assert settings.log_level == "INFO"
    assert settings.log_colors is True


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MIMETABLE_MIME_FILE", "/tmp/mime.types")
    monkeypatch.setenv("MIMETABLE_DEFAULT_CHARSET", "us-ascii")
    monkeypatch.setenv("MIMETABLE_MAX_TOKEN_SIZE", "1024")
    monkeypatch.setenv("MIMETABLE_TRANSPORT", "STDIO")
    monkeypatch.setenv("MIMETABLE_HTTP_PORT", "9000")
    monkeypatch.setenv("MIMETABLE_LOG_LEVEL", "debug")
    monkeypatch.setenv("MIMETABLE_LOG_PAYLOADS", "yes")

    settings = Settings.from_env()

    assert settings.mime_file == "/tmp/mime.types"
    assert settings.default_charset == "us-ascii"
    assert settings.max_token_size == 1024
    assert settings.transport == "stdio"
    assert settings.http_port == 9000
    assert settings.log_level == "DEBUG"
    assert settings.log_payloads is True


def test_settings_invalid_int_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MIMETABLE_HTTP_PORT", "not-a-port")
    monkeypatch.setenv("MIMETABLE_MAX_TOKEN_SIZE", "-5")

    settings = Settings.from_env()

    assert settings.http_port == 8000
    assert settings.max_token_size == 64 * 1024


def test_settings_invalid_transport_uses_http(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MIMETABLE_TRANSPORT", "carrier-pigeon")
    assert Settings.from_env().transport == "http"


def test_config_from_mime_file(mime_file: Path) -> None:
    """Config loads the table from an explicit path."""
    config = Config.from_mime_file(mime_file)

    assert config.mime_file == mime_file
    assert config.settings.mime_file == str(mime_file)
    assert config.lookup("html").serialize() == "text/html; charset=utf-8"
    assert config.lookup(".png").base_type == "image/png"
    assert config.lookup("gif") is None


def test_config_from_env(monkeypatch: pytest.MonkeyPatch, mime_file: Path) -> None:
    monkeypatch.setenv("MIMETABLE_MIME_FILE", str(mime_file))
    monkeypatch.setenv("MIMETABLE_DEFAULT_CHARSET", "latin-1")

    config = Config.from_env()

    assert config.lookup("htm").serialize() == "text/html; charset=latin-1"


def test_config_caches_table(mime_file: Path) -> None:
    """Table is loaded once and reused."""
    config = Config.from_mime_file(mime_file)
    first = config.get_table()

    mime_file.write_text("image/gif gif\n")

    assert config.get_table() is first
    assert "gif" not in first


def test_config_missing_file(tmp_path: Path) -> None:
    config = Config.from_mime_file(tmp_path / "missing.types")
    assert len(config.get_table()) == 0


def test_config_delegates_to_settings(mime_file: Path) -> None:
    config = Config.from_mime_file(mime_file)

    assert config.transport == "http"
    assert config.http_host == "0.0.0.0"
    assert config.http_port == 8000
    assert config.fallback_type == "application/octet-stream"
