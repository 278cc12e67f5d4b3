"""Whitespace field splitting for mime.types records."""

from typing import Final

ASCII_SPACE: Final[frozenset[int]] = frozenset(b" \t\n\v\f\r")


def split_fields(data: bytes) -> list[str]:
    """Split an ASCII record on runs of whitespace.

    Args:
        data: Record bytes, must be pure ASCII.

    Returns:
        Non-empty fields in order.

    Raises:
        ValueError: If data contains non-ASCII bytes.
    """
    if not data.isascii():
        raise ValueError(f"Input is not an ASCII string: {data!r}")

    fields: list[str] = []
    field_start: int | None = None
    for i, b in enumerate(data):
        if b in ASCII_SPACE:
            if field_start is not None:
                fields.append(data[field_start:i].decode("ascii"))
                field_start = None
        elif field_start is None:
            field_start = i

    if field_start is not None:
        fields.append(data[field_start:].decode("ascii"))
    return fields
