"""Tests for error handling middleware."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastmcp.exceptions import ToolError

from mimetable.middleware.errors import ErrorHandlingMiddleware


@pytest.fixture
def error_middleware() -> ErrorHandlingMiddleware:
    """Create an error handling middleware instance."""
    return ErrorHandlingMiddleware()


@pytest.fixture
def mock_context() -> MagicMock:
    """Create a mock middleware context."""
    context = MagicMock()
    context.method = "tools/call"
    context.message = MagicMock()
    context.message.name = "lookup_extension"
    return context


@pytest.mark.asyncio
async def test_error_middleware_passes_through_success(
    error_middleware: ErrorHandlingMiddleware,
    mock_context: MagicMock,
) -> None:
    """ErrorHandlingMiddleware passes through successful requests."""
    call_next = AsyncMock(return_value="success")

    result = await error_middleware.on_message(mock_context, call_next)

    assert result == "success"
    assert error_middleware.get_error_stats() == {}


@pytest.mark.asyncio
async def test_error_middleware_logs_unexpected_errors(mock_context: MagicMock) -> None:
    """Unexpected errors are logged at error level with traceback."""
    mock_logger = MagicMock()
    middleware = ErrorHandlingMiddleware(logger=mock_logger, include_traceback=True)
    call_next = AsyncMock(side_effect=KeyError("boom"))

    with pytest.raises(KeyError):
        await middleware.on_message(mock_context, call_next)

    mock_logger.error.assert_called_once()
    assert "Traceback" in str(mock_logger.error.call_args)


@pytest.mark.asyncio
async def test_error_middleware_warns_on_expected_errors(mock_context: MagicMock) -> None:
    """ToolError is logged as a warning, not an error."""
    mock_logger = MagicMock()
    middleware = ErrorHandlingMiddleware(logger=mock_logger)
    call_next = AsyncMock(side_effect=ToolError("Unknown extension: foo"))

    with pytest.raises(ToolError):
        await middleware.on_message(mock_context, call_next)

    mock_logger.warning.assert_called_once()
    mock_logger.error.assert_not_called()


@pytest.mark.asyncio
async def test_error_middleware_tracks_error_stats(
    error_middleware: ErrorHandlingMiddleware,
    mock_context: MagicMock,
) -> None:
    """ErrorHandlingMiddleware counts errors by type."""
    call_next = AsyncMock(side_effect=ValueError("test error"))

    for _ in range(2):
        with pytest.raises(ValueError):
            await error_middleware.on_message(mock_context, call_next)

    assert error_middleware.get_error_stats() == {"ValueError": 2}

    error_middleware.reset_stats()
    assert error_middleware.get_error_stats() == {}


@pytest.mark.asyncio
async def test_error_middleware_calls_callback(mock_context: MagicMock) -> None:
    callback = MagicMock()
    middleware = ErrorHandlingMiddleware(error_callback=callback)
    error = ValueError("test error")

    with pytest.raises(ValueError):
        await middleware.on_message(mock_context, AsyncMock(side_effect=error))

    callback.assert_called_once_with(error, mock_context)


@pytest.mark.asyncio
async def test_error_middleware_survives_failing_callback(mock_context: MagicMock) -> None:
    """A failing callback does not replace the original exception."""
    mock_logger = MagicMock()
    callback = MagicMock(side_effect=RuntimeError("callback broke"))
    middleware = ErrorHandlingMiddleware(logger=mock_logger, error_callback=callback)

    with pytest.raises(ValueError):
        await middleware.on_message(mock_context, AsyncMock(side_effect=ValueError("x")))

    mock_logger.warning.assert_called_once()
