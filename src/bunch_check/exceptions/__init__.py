"""Exception hierarchy for bunch-check."""

from .analysis import AnalysisError, FileAccessError, GitError
from .base import BunchCheckError
from .config import BunchFileError, ConfigurationError, InvalidConfigError

__all__ = [
    "BunchCheckError",
    "AnalysisError",
    "FileAccessError",
    "GitError",
    "ConfigurationError",
    "InvalidConfigError",
    "BunchFileError",
]
