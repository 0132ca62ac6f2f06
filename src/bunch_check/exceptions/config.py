"""Configuration exceptions: settings values and the .bunch file."""

from pathlib import Path
from typing import Any

from .base import BunchCheckError


class ConfigurationError(BunchCheckError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class BunchFileError(ConfigurationError):
    """Raised when the .bunch file is missing, unreadable or malformed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Can't build list of known extensions from '{path}'",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason
