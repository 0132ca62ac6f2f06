"""Git history access: commit model and log reader."""

from .models import ChangeType, CommitInfo, FileAction
from .reader import parse_log, read_commits

__all__ = [
    "ChangeType",
    "CommitInfo",
    "FileAction",
    "parse_log",
    "read_commits",
]
