"""Data models for commits read from git."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ChangeType(Enum):
    ADD = "ADD"
    MODIFY = "MODIFY"
    DELETE = "DELETE"
    RENAME = "RENAME"
    COPY = "COPY"


@dataclass(frozen=True)
class FileAction:
    change_type: ChangeType
    new_path: str | None = None  # None for deletions
    old_path: str | None = None  # None for additions


@dataclass(frozen=True)
class CommitInfo:
    hash: str
    title: str  # first line of the message
    author: str | None = None
    committer: str | None = None
    file_actions: tuple[FileAction, ...] = ()
