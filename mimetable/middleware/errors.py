"""Error handling middleware for consistent error responses."""

import logging
import traceback
from collections import defaultdict
from collections.abc import Callable
from typing import Any

from fastmcp.exceptions import ResourceError, ToolError
from fastmcp.server.middleware import MiddlewareContext

from mimetable.middleware.base import MimeTableMiddleware

ErrorCallback = Callable[[Exception, MiddlewareContext], None]

# Errors raised on purpose by handlers; logged without traceback
EXPECTED_ERRORS = (ToolError, ResourceError)


class ErrorHandlingMiddleware(MimeTableMiddleware):
    """Middleware that logs handler errors and tracks them by type.

    Expected errors (ToolError, ResourceError) are logged at warning level;
    anything else at error level, with an optional traceback. The original
    exception is always re-raised.

    Example:
        >>> def on_error(exc, ctx):
        ...     print(f"Error in {ctx.method}: {exc}")
        >>> middleware = ErrorHandlingMiddleware(error_callback=on_error)
        >>> mcp.add_middleware(middleware)
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_traceback: bool = False,
        error_callback: ErrorCallback | None = None,
    ) -> None:
        """Initialize error handling middleware.

        Args:
            logger: Optional custom logger.
            include_traceback: Whether to include full traceback for
                unexpected errors.
            error_callback: Optional callback called on each error.
                Receives (exception, context) as arguments.
        """
        super().__init__(logger=logger)
        self.include_traceback = include_traceback
        self.error_callback = error_callback
        self._error_counts: dict[str, int] = defaultdict(int)

    def get_error_stats(self) -> dict[str, int]:
        """Get error statistics by exception type name."""
        return dict(self._error_counts)

    def reset_stats(self) -> None:
        self._error_counts.clear()

    async def on_message(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log and count errors raised while handling a message.

        Raises:
            Exception: Re-raises the original exception after logging.
        """
        try:
            return await call_next(context)

        except Exception as e:
            error_type = type(e).__name__
            method = context.method
            self._error_counts[error_type] += 1

            if isinstance(e, EXPECTED_ERRORS):
                self.logger.warning("Rejected %s: %s: %s", method, error_type, e)
            elif self.include_traceback:
                self.logger.error(
                    "Error in %s: %s: %s\n%s",
                    method,
                    error_type,
                    e,
                    traceback.format_exc(),
                )
            else:
                self.logger.error("Error in %s: %s: %s", method, error_type, e)

            if self.error_callback:
                try:
                    self.error_callback(e, context)
                except Exception as callback_error:
                    self.logger.warning("Error callback failed: %s", callback_error)

            raise
