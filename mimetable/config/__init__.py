"""Configuration module for mimetable.

Provides focused classes for different configuration concerns:
- Config: Main configuration class (aggregates all components)
- MimeTypesParser: Parses mime.types files
- Settings: Environment variable configuration
"""

from mimetable.config.main import Config
from mimetable.config.parser import MimeTypesParser, load_mime_file
from mimetable.config.settings import Settings

__all__ = ["Config", "MimeTypesParser", "Settings", "load_mime_file"]
