"""mimetable: mime.types loading and media-type parsing."""

from mimetable.config import load_mime_file
from mimetable.models import MediaType
from mimetable.table import MimeTable
from mimetable.utils.mediatype import (
    DuplicateMediaParameterError,
    InvalidMediaParameterError,
    MediaTypeError,
    parse_media_type,
)
from mimetable.utils.scanner import LineScanner

__all__ = [
    "DuplicateMediaParameterError",
    "InvalidMediaParameterError",
    "LineScanner",
    "MediaType",
    "MediaTypeError",
    "MimeTable",
    "load_mime_file",
    "parse_media_type",
]
