"""Tests for path based MIME type detection."""

import pytest

from mimetable.table import MimeTable
from mimetable.utils.mime import get_mime_type


@pytest.fixture
def table() -> MimeTable:
    table = MimeTable()
    table.set_extension_type("html", "text/html")
    table.set_extension_type("gz", "application/gzip")
    table.set_extension_type("json", "application/json")
    return table


def test_get_mime_type_known_extension(table: MimeTable) -> None:
    assert get_mime_type("/var/www/index.html", table) == "text/html; charset=utf-8"


def test_get_mime_type_uses_last_suffix(table: MimeTable) -> None:
    assert get_mime_type("backup.tar.gz", table) == "application/gzip"


def test_get_mime_type_case_insensitive_fallback(table: MimeTable) -> None:
    assert get_mime_type("DATA.JSON", table) == "application/json"


def test_get_mime_type_unknown_uses_default(table: MimeTable) -> None:
    assert get_mime_type("notes.unknownext", table) == "application/octet-stream"
    assert get_mime_type("Makefile", table, default="text/plain") == "text/plain"


def test_get_mime_type_dotfile(table: MimeTable) -> None:
    """Hidden files without another suffix have no extension."""
    assert get_mime_type("/home/user/.html", table) == "application/octet-stream"
