"""MCP resources for mimetable."""

from mimetable.resources.mime import extension_resource, list_types_resource

__all__ = ["extension_resource", "list_types_resource"]
