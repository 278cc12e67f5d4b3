"""Middleware for the mimetable MCP server."""

from mimetable.middleware.base import MimeTableMiddleware
from mimetable.middleware.errors import ErrorHandlingMiddleware
from mimetable.middleware.logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "MimeTableMiddleware",
]
