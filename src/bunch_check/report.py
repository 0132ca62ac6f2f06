"""Human-readable report of a check run."""

from __future__ import annotations

from typing import Optional

from rich.console import Console

from .check.models import CheckResult, ProblemCommit
from .git.models import CommitInfo

DELETED_MARKER = "[deleted]"


def format_author(author: Optional[str], committer: Optional[str]) -> str:
    """Format ``[author]`` or ``[author (committer)]``; empty when both are unknown."""
    if author is None:
        author = committer

    if author is None:
        return ""
    if committer is None or author == committer:
        return f"[{author}]"
    return f"[{author} ({committer})]"


def commit_author_string(commit: CommitInfo) -> str:
    return format_author(commit.author, commit.committer)


def problem_lines(problem: ProblemCommit) -> list[str]:
    """Lines describing one problem commit: a header, then one line per file."""
    commit = problem.commit
    header = " ".join(
        part for part in (commit.hash, commit_author_string(commit), commit.title) if part
    )
    lines = [header]
    for forgotten in problem.forgotten:
        suffix = f" {DELETED_MARKER}" if forgotten.deleted else ""
        lines.append(f"    {forgotten.path}{suffix}")
    return lines


def render_result(result: CheckResult, console: Console) -> None:
    """Print the commit listing, the problems and, when clean, a summary."""

    def emit(line: str = "") -> None:
        console.print(line, markup=False, highlight=False, soft_wrap=True)

    emit("Found commits:")
    for commit in result.commits:
        emit(commit.title)
    emit()

    emit("Result:")
    for problem in result.problems:
        for line in problem_lines(problem):
            emit(line)
        emit()

    if not result.has_problems:
        emit(f"{result.commit_count} commits have been checked. No problem commits found.")
