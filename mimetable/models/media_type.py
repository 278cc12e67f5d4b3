"""Media type data model."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from mimetable.utils.mediatype import MediaTypeError, parse_media_type


@dataclass(frozen=True)
class MediaType:
    """Parsed media type, e.g. ``text/html; charset=utf-8``."""

    type: str
    sub_type: str
    parameters: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.type or not self.sub_type:
            raise ValueError(f"Media type needs a type and subtype: {self.type}/{self.sub_type}")
        object.__setattr__(self, "type", self.type.lower())
        object.__setattr__(self, "sub_type", self.sub_type.lower())
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @property
    def base_type(self) -> str:
        """The ``type/subtype`` part without parameters."""
        return f"{self.type}/{self.sub_type}"

    def serialize(self) -> str:
        """Render as ``type/subtype; key1=value1; key2=value2``.

        Parameters are emitted in stored order and values are not quoted.
        """
        params = "".join(f"; {k}={v}" for k, v in self.parameters.items())
        return f"{self.base_type}{params}"

    def __str__(self) -> str:
        return self.serialize()

    def __hash__(self) -> int:
        return hash((self.type, self.sub_type, frozenset(self.parameters.items())))

    @classmethod
    def from_string(cls, value: str) -> "MediaType":
        """Parse a full media-type string.

        Args:
            value: String such as ``multipart/form-data; boundary=x``

        Returns:
            MediaType instance

        Raises:
            MediaTypeError: If the base type is not ``type/subtype`` or a
                parameter is malformed.
        """
        base, params = parse_media_type(value)
        parts = base.split("/")
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise MediaTypeError(f"Invalid media type {base!r}")
        return cls(type=parts[0], sub_type=parts[1], parameters=params)
