"""Logging middleware for request/response tracking."""

import logging
import time
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from mimetable.middleware.base import MimeTableMiddleware


class LoggingMiddleware(MimeTableMiddleware):
    """Middleware that logs tool calls and resource reads with timing.

    Example:
        >>> middleware = LoggingMiddleware(slow_threshold_ms=50)
        >>> mcp.add_middleware(middleware)
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_payloads: bool = False,
        max_payload_length: int = 500,
        slow_threshold_ms: float = 1000.0,
    ) -> None:
        """Initialize logging middleware.

        Args:
            logger: Optional custom logger.
            include_payloads: Whether to log results at debug level.
            max_payload_length: Maximum payload length before truncation.
            slow_threshold_ms: Threshold in ms for slow request warnings.
        """
        super().__init__(logger=logger)
        self.include_payloads = include_payloads
        self.max_payload_length = max_payload_length
        self.slow_threshold_ms = slow_threshold_ms

    def _truncate(self, data: Any) -> str:
        text = str(data)
        if len(text) > self.max_payload_length:
            return text[: self.max_payload_length] + "... [truncated]"
        return text

    def _format_args(self, args: dict[str, Any] | None) -> str:
        """Format tool arguments for logging."""
        if not args:
            return "()"
        return "(" + ", ".join(f"{k}={v!r}" for k, v in args.items()) + ")"

    async def _timed(self, label: str, context: MiddlewareContext, call_next: Any) -> Any:
        """Run the next handler, logging its outcome and duration."""
        start = time.perf_counter()
        self.logger.info(">>> %s", label)

        try:
            result = await call_next(context)
        except Exception as e:
            duration_ms = (time.perf_counter() - start) * 1000
            self.logger.error(
                "!!! %s -> %s: %s [%.1fms]", label, type(e).__name__, e, duration_ms
            )
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        if duration_ms >= self.slow_threshold_ms:
            self.logger.warning("<<< %s [%.1fms SLOW!]", label, duration_ms)
        else:
            self.logger.info("<<< %s [%.1fms]", label, duration_ms)

        if self.include_payloads and result is not None:
            self.logger.debug("    Result: %s", self._truncate(result))
        return result

    async def on_call_tool(self, context: MiddlewareContext, call_next: Any) -> Any:
        """Log tool calls with name, arguments, and timing."""
        tool_name = getattr(context.message, "name", "unknown")
        args = getattr(context.message, "arguments", None)
        return await self._timed(f"TOOL: {tool_name}{self._format_args(args)}", context, call_next)

    async def on_read_resource(self, context: MiddlewareContext, call_next: Any) -> Any:
        """Log resource reads with URI and timing."""
        uri = getattr(context.message, "uri", "unknown")
        return await self._timed(f"RESOURCE: {uri}", context, call_next)
