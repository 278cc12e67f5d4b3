"""Tests for middleware base class."""

import logging

from fastmcp.server.middleware import Middleware

from mimetable.middleware.base import MimeTableMiddleware


def test_base_is_fastmcp_middleware() -> None:
    assert isinstance(MimeTableMiddleware(), Middleware)


def test_base_default_logger() -> None:
    middleware = MimeTableMiddleware()
    assert middleware.logger.name == "mimetable.middleware.base"


def test_base_custom_logger() -> None:
    custom = logging.getLogger("custom")
    assert MimeTableMiddleware(logger=custom).logger is custom
