"""
envlayer/errors.py
Load failures raised by the loader when running in strict mode.
"""

from __future__ import annotations


class ErrorKind:
    NOT_FOUND = "not_found"
    UNREADABLE_FILE = "unreadable_file"
    INVALID_FILENAME = "invalid_filename"
    INVALID_STRUCTURED_CONTENT = "invalid_structured_content"


class ConfigError(ValueError):
    """Base class for every load failure."""

    kind = ""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class NotFound(ConfigError):
    """Target path, or the env file inside a directory, does not exist."""
    kind = ErrorKind.NOT_FOUND


class UnreadableFile(ConfigError):
    """File exists but could not be read or decoded."""
    kind = ErrorKind.UNREADABLE_FILE


class InvalidFilename(ConfigError):
    """Resolved file is neither `.env` nor `.env.yaml`."""
    kind = ErrorKind.INVALID_FILENAME


class InvalidStructuredContent(ConfigError):
    """Structured file did not hold a mapping of scalars."""
    kind = ErrorKind.INVALID_STRUCTURED_CONTENT
