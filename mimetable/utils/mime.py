"""MIME type detection utilities."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mimetable.table import MimeTable


def get_mime_type(
    path: str,
    table: "MimeTable",
    default: str = "application/octet-stream",
) -> str:
    """Infer MIME type from file extension.

    Args:
        path: File path to analyze.
        table: Extension table to consult.
        default: Type returned when the extension is unknown.

    Returns:
        Serialized media type, e.g. 'text/html; charset=utf-8'.
    """
    media_type = table.type_for_path(path)
    if media_type is None:
        return default
    return media_type.serialize()
