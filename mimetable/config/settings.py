"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

from mimetable.config.parser import DEFAULT_MIME_FILE
from mimetable.utils.scanner import MAX_SCAN_TOKEN_SIZE

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # mime.types loading
    mime_file: str = field(default=DEFAULT_MIME_FILE)
    default_charset: str = field(default="utf-8")
    fallback_type: str = field(default="application/octet-stream")
    max_token_size: int = field(default=MAX_SCAN_TOKEN_SIZE)

    # Transport
    transport: str = field(default="http")
    http_host: str = field(default="0.0.0.0")
    http_port: int = field(default=8000)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)
    log_payloads: bool = field(default=False)
    slow_threshold_ms: int = field(default=1000)
    include_traceback: bool = field(default=False)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from MIMETABLE_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            mime_file=os.getenv("MIMETABLE_MIME_FILE", DEFAULT_MIME_FILE),
            default_charset=os.getenv("MIMETABLE_DEFAULT_CHARSET", "utf-8"),
            fallback_type=os.getenv("MIMETABLE_FALLBACK_TYPE", "application/octet-stream"),
            max_token_size=cls._get_int("MIMETABLE_MAX_TOKEN_SIZE", MAX_SCAN_TOKEN_SIZE),
            transport=cls._get_transport(),
            http_host=os.getenv("MIMETABLE_HTTP_HOST", "0.0.0.0"),
            http_port=cls._get_int("MIMETABLE_HTTP_PORT", 8000),
            log_level=os.getenv("MIMETABLE_LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("MIMETABLE_LOG_COLORS", True),
            log_payloads=cls._get_bool("MIMETABLE_LOG_PAYLOADS", False),
            slow_threshold_ms=cls._get_int("MIMETABLE_SLOW_THRESHOLD_MS", 1000),
            include_traceback=cls._get_bool("MIMETABLE_INCLUDE_TRACEBACK", False),
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get a positive integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or invalid

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            parsed = int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

        if parsed <= 0:
            logger.warning("Non-positive value for %s: %s, using default %d", key, value, default)
            return default
        return parsed

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_transport() -> str:
        """Get transport from environment with validation.

        Returns:
            Transport type ("http" or "stdio")
        """
        transport = os.getenv("MIMETABLE_TRANSPORT", "").lower()
        if transport in ("http", "stdio"):
            return transport
        return "http"
