"""Application configuration.

Delegates to specialized components:
- MimeTypesParser: Reads the mime.types file
- Settings: Environment variables
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from mimetable.config.parser import MimeTypesParser
from mimetable.config.settings import Settings
from mimetable.models import MediaType
from mimetable.table import MimeTable

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Application configuration.

    Aggregates environment settings and the mime.types parser, and holds
    the loaded table.
    """

    settings: Settings
    parser: MimeTypesParser
    _table: MimeTable | None = field(default=None, init=False, repr=False)

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment.

        Returns:
            Configured instance with all components initialized
        """
        settings = Settings.from_env()
        parser = MimeTypesParser(
            mime_file=settings.mime_file,
            default_charset=settings.default_charset,
            max_token_size=settings.max_token_size,
        )
        return cls(settings=settings, parser=parser)

    @classmethod
    def from_mime_file(cls, mime_file: Path | str) -> "Config":
        """Create config for an explicit mime.types path.

        Other settings still come from the environment.

        Args:
            mime_file: Path to mime.types file

        Returns:
            Configured instance
        """
        settings = Settings.from_env()
        settings.mime_file = str(mime_file)
        parser = MimeTypesParser(
            mime_file=mime_file,
            default_charset=settings.default_charset,
            max_token_size=settings.max_token_size,
        )
        return cls(settings=settings, parser=parser)

    def get_table(self) -> MimeTable:
        """Get the extension table.

        Loads and caches the table on first call.

        Returns:
            Frozen MimeTable
        """
        if self._table is None:
            self._table = self.parser.parse()
        return self._table

    def lookup(self, ext: str) -> MediaType | None:
        """Get media type by extension.

        Args:
            ext: File extension, with or without leading dot

        Returns:
            MediaType if found, None otherwise
        """
        return self.get_table().lookup(ext)

    # Delegate to settings for convenience
    @property
    def mime_file(self) -> Path:
        """Path to the mime.types file."""
        return self.parser.mime_file

    @property
    def fallback_type(self) -> str:
        """Media type reported for unknown extensions."""
        return self.settings.fallback_type

    @property
    def transport(self) -> str:
        """Transport type (http or stdio)."""
        return self.settings.transport

    @property
    def http_host(self) -> str:
        """HTTP server bind address."""
        return self.settings.http_host

    @property
    def http_port(self) -> int:
        """HTTP server port."""
        return self.settings.http_port
