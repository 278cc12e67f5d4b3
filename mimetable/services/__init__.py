"""Services for mimetable."""

from mimetable.services.state import get_config, reset_state, set_config

__all__ = [
    "get_config",
    "reset_state",
    "set_config",
]
