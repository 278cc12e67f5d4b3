"""MCP tools for mimetable."""

from mimetable.tools.mime import guess_type, lookup_extension, parse_media_type

__all__ = ["guess_type", "lookup_extension", "parse_media_type"]
