"""Read a commit range from git via subprocess."""

from __future__ import annotations

import subprocess
from pathlib import Path

from ..exceptions import GitError
from ..logging_config import get_logger
from .models import ChangeType, CommitInfo, FileAction

logger = get_logger(__name__)

# Record and field separators; neither can appear in a name or subject line
_RECORD_SEP = "\x1e"
_FIELD_SEP = "\x1f"
_FORMAT = f"--format={_RECORD_SEP}%H{_FIELD_SEP}%an{_FIELD_SEP}%cn{_FIELD_SEP}%s"

_STATUS_TYPES = {
    "A": ChangeType.ADD,
    "M": ChangeType.MODIFY,
    "T": ChangeType.MODIFY,
    "D": ChangeType.DELETE,
    "R": ChangeType.RENAME,
    "C": ChangeType.COPY,
}


def read_commits(
    repo_path: str | Path,
    since_ref: str,
    until_ref: str,
    detect_renames: bool = True,
    timeout: int = 60,
) -> list[CommitInfo]:
    """Read commits reachable from ``since_ref`` but not from ``until_ref``.

    Commits are returned newest first. Merge commits are diffed against
    their first parent.

    Raises:
        GitError: If git is unavailable, a ref is unknown, or git times out.
    """
    cmd = [
        "git",
        "-C",
        str(repo_path),
        "-c",
        "core.quotePath=false",
        "log",
        _FORMAT,
        "--name-status",
        "--diff-merges=first-parent",
        "-M" if detect_renames else "--no-renames",
        f"{until_ref}..{since_ref}",
        "--",
    ]
    logger.debug("Running %s", " ".join(cmd))

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except FileNotFoundError:
        raise GitError("git executable not found", command=cmd)
    except subprocess.TimeoutExpired:
        raise GitError(f"git log timed out after {timeout}s", command=cmd)

    if result.returncode != 0:
        raise GitError(result.stderr.strip() or "git log failed", cmd, result.returncode)

    commits = parse_log(result.stdout)
    logger.debug("Read %d commits in %s..%s", len(commits), until_ref, since_ref)
    return commits


def parse_log(raw: str) -> list[CommitInfo]:
    """Parse ``git log --name-status`` output produced with the reader's format."""
    commits = []
    for record in raw.split(_RECORD_SEP):
        if not record.strip():
            continue

        header, _, body = record.partition("\n")
        parts = header.split(_FIELD_SEP, 3)
        if len(parts) < 4:
            logger.warning("Skipping malformed git log header: %r", header)
            continue
        commit_hash, author, committer, title = parts

        actions = []
        for line in body.splitlines():
            action = parse_status_line(line)
            if action is not None:
                actions.append(action)

        commits.append(
            CommitInfo(
                hash=commit_hash,
                title=title,
                author=author or None,
                committer=committer or None,
                file_actions=tuple(actions),
            )
        )

    return commits


def parse_status_line(line: str) -> FileAction | None:
    """Parse one ``--name-status`` line.

    Lines look like ``M\\tpath`` or, for renames and copies,
    ``R100\\told_path\\tnew_path``. Returns None for blank or unknown lines.
    """
    line = line.rstrip("\r")
    if not line.strip():
        return None

    parts = line.split("\t")
    if len(parts) < 2:
        return None

    change_type = _STATUS_TYPES.get(parts[0][:1])
    if change_type is None:
        logger.debug("Ignoring unsupported status line: %r", line)
        return None

    if change_type in (ChangeType.RENAME, ChangeType.COPY):
        if len(parts) < 3:
            return None
        return FileAction(change_type, new_path=parts[2], old_path=parts[1])
    if change_type is ChangeType.ADD:
        return FileAction(change_type, new_path=parts[1])
    if change_type is ChangeType.DELETE:
        return FileAction(change_type, old_path=parts[1])
    return FileAction(change_type, new_path=parts[1], old_path=parts[1])
