"""Tests for whitespace field splitting."""

import pytest

from mimetable.utils.fields import split_fields


def test_split_fields_basic() -> None:
    """Fields are split on runs of whitespace."""
    assert split_fields(b"text/html  html\thtm") == ["text/html", "html", "htm"]


def test_split_fields_trims_edges() -> None:
    """Leading and trailing whitespace produce no empty fields."""
    assert split_fields(b" \t a b \r\n") == ["a", "b"]


def test_split_fields_all_whitespace_kinds() -> None:
    assert split_fields(b"a\vb\fc\rd\ne f") == ["a", "b", "c", "d", "e", "f"]


def test_split_fields_empty() -> None:
    assert split_fields(b"") == []
    assert split_fields(b"   \t") == []


def test_split_fields_rejects_non_ascii() -> None:
    """Non-ASCII input is a contract violation."""
    with pytest.raises(ValueError, match="not an ASCII string"):
        split_fields("text/plain txé".encode())
