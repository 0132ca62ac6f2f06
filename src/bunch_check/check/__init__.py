"""Forgotten bunch file detection over a commit range."""

from .creation import CreationIndex, build_creation_index
from .deletion import DeletionCache, is_deleted_bunch_file
from .detector import check_one_commit, is_eligible_at
from .models import CheckResult, ForgottenFile, ProblemCommit
from .paths import bunch_file_path, file_extension
from .runner import run_check

__all__ = [
    "CheckResult",
    "CreationIndex",
    "DeletionCache",
    "ForgottenFile",
    "ProblemCommit",
    "build_creation_index",
    "bunch_file_path",
    "check_one_commit",
    "file_extension",
    "is_deleted_bunch_file",
    "is_eligible_at",
    "run_check",
]
