"""MIME lookup tools."""

import logging
from typing import Any

from fastmcp.exceptions import ToolError

from mimetable.services import get_config
from mimetable.utils.mediatype import MediaTypeError
from mimetable.utils.mediatype import parse_media_type as parse_type_string
from mimetable.utils.mime import get_mime_type

logger = logging.getLogger(__name__)


async def parse_media_type(text: str) -> dict[str, Any]:
    """Parse a media-type string such as 'text/html; charset=utf-8'.

    Args:
        text: Media type with optional ';name=value' parameters.

    Returns:
        The lowercase base type and the parameters.
    """
    try:
        media_type, params = parse_type_string(text)
    except MediaTypeError as e:
        raise ToolError(str(e)) from e
    return {"media_type": media_type, "parameters": params}


async def lookup_extension(extension: str) -> str:
    """Look up the media type registered for a file extension.

    Args:
        extension: File extension, e.g. 'html' or '.html'.

    Returns:
        Serialized media type, e.g. 'text/html; charset=utf-8'.
    """
    media_type = get_config().lookup(extension)
    if media_type is None:
        raise ToolError(f"Unknown extension: {extension}")
    return media_type.serialize()


async def guess_type(path: str) -> str:
    """Guess the media type of a file path from its extension.

    Args:
        path: File name or path.

    Returns:
        Serialized media type, or the configured fallback type.
    """
    config = get_config()
    return get_mime_type(path, config.get_table(), default=config.fallback_type)
