"""Global state management for mimetable."""

from mimetable.config import Config

# Global state (initialized on first access)
_config: Config | None = None


def get_config() -> Config:
    """Get or create config."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_state() -> None:
    """Reset global state for testing.

    Clears the singleton config, allowing tests to start with fresh
    state. Should only be used in test fixtures.
    """
    global _config
    _config = None


def set_config(config: Config) -> None:
    """Set the global config instance.

    Allows tests to inject a custom config without modifying module internals.

    Args:
        config: Config instance to use globally.
    """
    global _config
    _config = config
