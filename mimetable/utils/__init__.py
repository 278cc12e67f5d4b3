"""Utilities for mimetable."""

from mimetable.utils.console import ColorfulFormatter, MCPRequestFormatter
from mimetable.utils.fields import split_fields
from mimetable.utils.mediatype import (
    DuplicateMediaParameterError,
    InvalidMediaParameterError,
    MediaTypeError,
    parse_media_type,
)
from mimetable.utils.mime import get_mime_type
from mimetable.utils.scanner import (
    BadReadCountError,
    LineScanner,
    NoProgressError,
    ScannerError,
    TokenTooLongError,
    scan_lines,
)

__all__ = [
    "BadReadCountError",
    "ColorfulFormatter",
    "DuplicateMediaParameterError",
    "get_mime_type",
    "InvalidMediaParameterError",
    "LineScanner",
    "MCPRequestFormatter",
    "MediaTypeError",
    "NoProgressError",
    "parse_media_type",
    "scan_lines",
    "ScannerError",
    "split_fields",
    "TokenTooLongError",
]
