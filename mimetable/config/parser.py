"""mime.types file parser.

Reads a mime.types file and builds an extension to media type table.
"""

import logging
from pathlib import Path

from mimetable.protocols import Reader
from mimetable.table import MimeTable
from mimetable.utils.fields import split_fields
from mimetable.utils.scanner import MAX_SCAN_TOKEN_SIZE, LineScanner

logger = logging.getLogger(__name__)

DEFAULT_MIME_FILE = "/etc/mime.types"


class MimeTypesParser:
    """Parser for mime.types files.

    Each non-comment line holds a media type followed by the extensions
    that map to it. Lines with a malformed type are skipped.
    """

    def __init__(
        self,
        mime_file: Path | str | None = None,
        default_charset: str = "utf-8",
        max_token_size: int = MAX_SCAN_TOKEN_SIZE,
    ):
        """Initialize mime.types parser.

        Args:
            mime_file: Path to mime.types file (default: /etc/mime.types)
            default_charset: Charset added to text/* types that lack one
            max_token_size: Longest line the scanner will buffer
        """
        if mime_file is None:
            mime_file = DEFAULT_MIME_FILE

        self.mime_file = Path(mime_file)
        self.default_charset = default_charset
        self.max_token_size = max_token_size

    def parse(self) -> MimeTable:
        """Parse the mime.types file.

        Returns:
            Frozen MimeTable (empty if the file is missing or unreadable)
        """
        table = MimeTable(default_charset=self.default_charset)

        if not self.mime_file.exists() or self.mime_file.is_dir():
            logger.warning("mime.types not found: %s", self.mime_file)
            table.freeze()
            return table

        try:
            with self.mime_file.open("rb") as f:
                logger.debug("Reading mime.types from %s", self.mime_file)
                self.parse_lines(f, table)
        except OSError as e:
            logger.warning("Cannot read mime.types %s: %s", self.mime_file, e)

        table.freeze()
        logger.info("Parsed %d extensions from %s", len(table), self.mime_file)
        return table

    def parse_lines(self, reader: Reader, table: MimeTable | None = None) -> MimeTable:
        """Populate a table from any byte source.

        Args:
            reader: Byte source in mime.types format
            table: Table to add to (default: new table)

        Returns:
            The populated table (not frozen)
        """
        if table is None:
            table = MimeTable(default_charset=self.default_charset)

        scanner = LineScanner(reader, max_token_size=self.max_token_size)
        for line in scanner:
            try:
                fs = split_fields(line)
            except ValueError as e:
                logger.warning("Skipping non-ASCII line in %s: %s", self.mime_file, e)
                continue

            # Skip comments and types without extensions
            if len(fs) <= 1 or fs[0].startswith("#"):
                continue

            mime_type = fs[0]
            for ext in fs[1:]:
                table.set_extension_type(ext, mime_type)

        if scanner.error is not None:
            logger.warning(
                "Stopped reading %s: %s: %s",
                self.mime_file,
                type(scanner.error).__name__,
                scanner.error,
            )

        return table


def load_mime_file(path: Path | str, default_charset: str = "utf-8") -> MimeTable:
    """Load a mime.types file into a frozen MimeTable."""
    return MimeTypesParser(path, default_charset=default_charset).parse()
