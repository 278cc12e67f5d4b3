"""Extension to media type lookup table."""

import logging
from collections.abc import ItemsView, Iterator

from mimetable.models import MediaType
from mimetable.utils.mediatype import MediaTypeError, parse_media_type

logger = logging.getLogger(__name__)


class MimeTable:
    """Mapping from file extension (no leading dot) to MediaType.

    Populated by the loader, then frozen so it can be shared read-only.
    Later entries for the same extension replace earlier ones.
    """

    def __init__(self, default_charset: str = "utf-8") -> None:
        """Initialize an empty table.

        Args:
            default_charset: Charset added to text/* types that lack one
        """
        self.default_charset = default_charset
        self._types: dict[str, MediaType] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        """Whether the table rejects further writes."""
        return self._frozen

    def freeze(self) -> None:
        """Reject further writes."""
        self._frozen = True

    def set_extension_type(self, ext: str, mime_type: str) -> MediaType | None:
        """Map an extension to a media-type string.

        Malformed media types are skipped rather than raised.

        Args:
            ext: File extension without leading dot
            mime_type: Media type, optionally with parameters

        Returns:
            The stored MediaType, or None if mime_type was rejected

        Raises:
            RuntimeError: If the table is frozen
        """
        if self._frozen:
            raise RuntimeError("MimeTable is frozen")

        try:
            just_type, params = parse_media_type(mime_type)
        except MediaTypeError as e:
            logger.debug("Skipping %s for .%s: %s", mime_type, ext, e)
            return None

        if just_type.startswith("text/") and "charset" not in params:
            params["charset"] = self.default_charset

        parts = just_type.split("/")
        if len(parts) != 2 or not parts[0] or not parts[1]:
            logger.debug("Skipping %s for .%s: not type/subtype", mime_type, ext)
            return None

        media_type = MediaType(type=parts[0], sub_type=parts[1], parameters=params)
        self._types[ext] = media_type
        return media_type

    def lookup(self, ext: str) -> MediaType | None:
        """Get the media type for an extension.

        A leading dot is ignored. Exact matches win over lowercase ones.
        """
        ext = ext.removeprefix(".")
        media_type = self._types.get(ext)
        if media_type is None:
            media_type = self._types.get(ext.lower())
        return media_type

    def type_for_path(self, path: str) -> MediaType | None:
        """Get the media type for a file path from its last suffix."""
        name = path.replace("\\", "/").rsplit("/", 1)[-1]
        if "." not in name.lstrip("."):
            return None
        return self.lookup(name.rsplit(".", 1)[1])

    def extensions_for(self, base_type: str) -> list[str]:
        """List extensions mapped to a ``type/subtype``, sorted."""
        base_type = base_type.lower().strip()
        return sorted(ext for ext, mt in self._types.items() if mt.base_type == base_type)

    def items(self) -> ItemsView[str, MediaType]:
        return self._types.items()

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, ext: object) -> bool:
        return isinstance(ext, str) and self.lookup(ext) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)
