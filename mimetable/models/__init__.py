"""Data models for mimetable."""

from mimetable.models.media_type import MediaType

__all__ = ["MediaType"]
