"""Analysis-related exceptions: git history and bunch file access."""

from pathlib import Path
from typing import Dict, List, Optional

from .base import BunchCheckError


class AnalysisError(BunchCheckError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class GitError(BunchCheckError):
    """Raised when commits cannot be read from git."""

    def __init__(
        self,
        reason: str,
        command: Optional[List[str]] = None,
        returncode: Optional[int] = None,
    ):
        details: Dict[str, str] = {}
        if command:
            details["command"] = " ".join(command)
        if returncode is not None:
            details["returncode"] = str(returncode)

        super().__init__(f"Git failed: {reason}", details=details)
        self.reason = reason
        self.command = command
        self.returncode = returncode
