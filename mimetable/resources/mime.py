"""MIME table resources."""

from collections import defaultdict

from fastmcp.exceptions import ResourceError

from mimetable.services import get_config


async def extension_resource(extension: str) -> str:
    """Serialized media type for one extension.

    Args:
        extension: File extension from the URI, e.g. mime://html

    Returns:
        Serialized media type
    """
    media_type = get_config().lookup(extension)
    if media_type is None:
        raise ResourceError(f"Unknown extension: {extension}")
    return media_type.serialize()


async def list_types_resource() -> str:
    """List every media type with its extensions.

    Returns:
        One line per media type, sorted by type.
    """
    config = get_config()
    table = config.get_table()

    if not table:
        return f"No media types loaded from {config.mime_file}."

    by_type: dict[str, list[str]] = defaultdict(list)
    for ext, media_type in table.items():
        by_type[media_type.serialize()].append(ext)

    lines = [f"Media types from {config.mime_file}", "=" * 40, ""]
    for media_type_str in sorted(by_type):
        lines.append(f"{media_type_str}: {' '.join(sorted(by_type[media_type_str]))}")

    lines.append("")
    lines.append(f"{len(table)} extension(s), {len(by_type)} type(s)")
    return "\n".join(lines)
