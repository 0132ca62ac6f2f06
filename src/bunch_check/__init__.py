"""
bunch-check - audit git history for forgotten bunch files

A bunch file ``<path>.<ext>`` is a per-branch variant of ``<path>``. Whenever
the original changes, every existing bunch file of it has to change in the
same commit. This package finds the commits that broke the rule.
"""

__version__ = "0.1.0"

from .check import CheckResult, build_creation_index, check_one_commit, is_deleted_bunch_file, run_check
from .config import CheckSettings, load_settings
from .git import ChangeType, CommitInfo, FileAction
from .report import commit_author_string, format_author

__all__ = [
    "run_check",  # Main entry point
    "CheckResult",
    "CheckSettings",
    "load_settings",
    "build_creation_index",
    "check_one_commit",
    "is_deleted_bunch_file",
    "commit_author_string",
    "format_author",
    "ChangeType",
    "CommitInfo",
    "FileAction",
]
