"""Result models for a check run."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..git.models import CommitInfo


@dataclass(frozen=True)
class ForgottenFile:
    path: str
    deleted: bool = False  # empty on disk: intentionally dropped variant


@dataclass
class ProblemCommit:
    commit: CommitInfo
    forgotten: list[ForgottenFile] = field(default_factory=list)

    @property
    def forgotten_paths(self) -> list[str]:
        return [f.path for f in self.forgotten]


@dataclass
class CheckResult:
    commits: list[CommitInfo]  # newest first
    extensions: tuple[str, ...]
    problems: list[ProblemCommit] = field(default_factory=list)

    @property
    def has_problems(self) -> bool:
        return bool(self.problems)

    @property
    def commit_count(self) -> int:
        return len(self.commits)
