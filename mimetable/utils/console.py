"""Colorful console logging formatter."""

import logging
import re
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "white": "\033[37m",
    "cyan": "\033[36m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bright_cyan": "\033[96m",
    "bg_red": "\033[41m",
}

# Log level colors
LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

# Component colors for logger names
COMPONENT_COLORS = {
    "mimetable.server": COLORS["bright_cyan"],
    "mimetable.config": COLORS["green"],
    "mimetable.table": COLORS["bright_magenta"],
    "mimetable.utils": COLORS["cyan"],
    "mimetable.middleware": COLORS["yellow"],
    "default": COLORS["white"],
}

MEDIA_TYPE_PATTERN = re.compile(r"\b([a-z]+/[\w.+-]+)")
URI_PATTERN = re.compile(r"(\w+://[^\s]+)")
DURATION_PATTERN = re.compile(r"\b(\d+\.?\d*ms)\b")


class ColorfulFormatter(logging.Formatter):
    """Colorful log formatter with component highlighting."""

    def __init__(self, use_colors: bool = True, tz: str | None = None) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to use ANSI colors.
            tz: IANA timezone name for timestamps (default: local time).
        """
        super().__init__()
        self.use_colors = use_colors
        self.tz: tzinfo | None = ZoneInfo(tz) if tz else None

    def _colorize(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def _get_component_color(self, name: str) -> str:
        """Get color for a logger name/component."""
        for prefix, color in COMPONENT_COLORS.items():
            if prefix != "default" and name.startswith(prefix):
                return color
        return COMPONENT_COLORS["default"]

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created, tz=self.tz)
        return f"{dt.strftime('%H:%M:%S')}.{int(record.msecs):03d} {dt.strftime('%m/%d')}"

    def _format_level(self, record: logging.LogRecord) -> str:
        level = record.levelname
        color = LEVEL_COLORS.get(level, COLORS["white"])
        return self._colorize(f"{level:<8}", color)

    def _format_component(self, record: logging.LogRecord) -> str:
        name = record.name.removeprefix("mimetable.")
        color = self._get_component_color(record.name)
        return self._colorize(f"{name:<20}", color)

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with colors and timestamp."""
        timestamp = self._colorize(self._format_timestamp(record), COLORS["dim"])
        level = self._format_level(record)
        component = self._format_component(record)
        sep = self._colorize("|", COLORS["dim"])
        message = self._highlight_message(record.getMessage())

        line = f"{timestamp} {sep} {level} {sep} {component} {sep} {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line

    def _highlight_message(self, message: str) -> str:
        """Highlight URIs, media types and durations in log messages."""
        if not self.use_colors:
            return message

        if "://" in message:
            message = URI_PATTERN.sub(
                f"{COLORS['bright_blue']}\\1{COLORS['reset']}", message
            )
        elif "/" in message:
            message = MEDIA_TYPE_PATTERN.sub(
                f"{COLORS['bright_magenta']}\\1{COLORS['reset']}", message
            )

        if "ms" in message:
            message = DURATION_PATTERN.sub(
                f"{COLORS['bright_yellow']}\\1{COLORS['reset']}", message
            )

        return message


class MCPRequestFormatter(ColorfulFormatter):
    """Extended formatter with MCP request/response markers."""

    def format(self, record: logging.LogRecord) -> str:
        """Format with a leading marker for notable events."""
        base = super().format(record)

        if not self.use_colors:
            return base

        message = record.getMessage().lower()
        if "starting" in message or "ready" in message:
            return f"{COLORS['bright_green']}>>>{COLORS['reset']} {base}"
        elif "shutting down" in message:
            return f"{COLORS['bright_red']}<<<{COLORS['reset']} {base}"
        elif "error" in message or "failed" in message:
            return f"{COLORS['bright_red']}!!{COLORS['reset']}  {base}"
        elif "skipping" in message or "slow" in message:
            return f"{COLORS['bright_yellow']}!{COLORS['reset']}   {base}"
        elif "parsed" in message or "loaded" in message:
            return f"{COLORS['bright_green']}OK{COLORS['reset']}  {base}"

        return f"    {base}"
