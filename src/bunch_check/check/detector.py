"""Detection of bunch files a commit should have updated but did not."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional, Sequence

from ..git.models import CommitInfo
from .paths import bunch_file_path, file_extension


def check_one_commit(
    commit: CommitInfo,
    extensions: Sequence[str],
    directory: str | Path,
    creation_index: Mapping[str, int],
    commit_index: int,
) -> list[str]:
    """Return the bunch files forgotten by ``commit``, in discovery order.

    For every touched original file (one whose own extension is not a bunch
    extension) each sibling ``<path>.<ext>`` is forgotten when it was not
    touched by the same commit, exists under ``directory``, and passes
    :func:`is_eligible_at`.
    """
    root = Path(directory)
    known = set(extensions)
    affected_paths = {a.new_path for a in commit.file_actions if a.new_path is not None}

    forgotten: list[str] = []
    for action in commit.file_actions:
        new_path = action.new_path
        if new_path is None or file_extension(new_path) in known:
            continue

        for extension in extensions:
            candidate = bunch_file_path(new_path, extension)
            if (
                candidate not in affected_paths
                and (root / candidate).exists()
                and is_eligible_at(creation_index.get(candidate), commit_index)
            ):
                forgotten.append(candidate)

    return forgotten


def is_eligible_at(creation_commit_index: Optional[int], commit_index: int) -> bool:
    """Whether a bunch file can be forgotten by the commit at ``commit_index``.

    Commits are indexed newest first. A file not created within the checked
    range is always eligible; otherwise only commits newer than the creating
    one (smaller index) can forget it. The creating commit itself is exempt.
    """
    return creation_commit_index is None or commit_index < creation_commit_index
