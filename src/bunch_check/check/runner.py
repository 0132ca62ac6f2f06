"""Run the forgotten-bunch-file check over a commit range."""

from __future__ import annotations

from typing import Optional, Sequence

from ..config import CheckSettings, resolve_extensions
from ..git.models import CommitInfo
from ..git.reader import read_commits
from ..logging_config import get_logger
from .creation import build_creation_index
from .deletion import DeletionCache
from .detector import check_one_commit
from .models import CheckResult, ForgottenFile, ProblemCommit

logger = get_logger(__name__)


def run_check(
    settings: CheckSettings, commits: Optional[Sequence[CommitInfo]] = None
) -> CheckResult:
    """Check every commit of the configured range for forgotten bunch files.

    Extensions are resolved before any commit is read, so a configuration
    error aborts the run early. ``commits`` may be passed to skip reading
    git; they must be ordered newest first.

    Every commit is evaluated; problems are collected into the result rather
    than raised, and the caller decides what a problem means for the exit
    status.

    Raises:
        ConfigurationError: If extensions cannot be resolved
        GitError: If commits cannot be read
        FileAccessError: If a forgotten bunch file cannot be read
    """
    extensions = resolve_extensions(settings)

    if commits is None:
        commits = read_commits(
            settings.repo_path,
            settings.since_ref,
            settings.until_ref,
            detect_renames=settings.detect_renames,
            timeout=settings.git_timeout_seconds,
        )
    commits = list(commits)

    creation_index = build_creation_index(commits, extensions)
    deletion_cache = DeletionCache(settings.repo_path)
    result = CheckResult(commits=commits, extensions=extensions)

    for commit_index, commit in enumerate(commits):
        forgotten_paths = check_one_commit(
            commit, extensions, settings.repo_path, creation_index, commit_index
        )
        if not forgotten_paths:
            continue

        logger.debug("%s forgot %d bunch files", commit.hash, len(forgotten_paths))
        result.problems.append(
            ProblemCommit(
                commit=commit,
                forgotten=[
                    ForgottenFile(path, deleted=deletion_cache.is_deleted(path))
                    for path in forgotten_paths
                ],
            )
        )

    logger.info(
        "Checked %d commits, %d with forgotten bunch files",
        result.commit_count,
        len(result.problems),
    )
    return result
