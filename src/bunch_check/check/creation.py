"""Creation index: which checked commit first added each bunch file."""

from __future__ import annotations

from typing import Iterable, Sequence

from ..git.models import ChangeType, CommitInfo
from ..logging_config import get_logger
from .paths import file_extension

logger = get_logger(__name__)

CreationIndex = dict[str, int]


def build_creation_index(
    commits: Sequence[CommitInfo], extensions: Iterable[str]
) -> CreationIndex:
    """Map each bunch file added within ``commits`` to the index of its ADD.

    Commits are scanned in the given order and the first ADD of a path
    wins; a later ADD of the same path (deleted and recreated) is ignored.
    Only paths whose own extension is a bunch extension are recorded.
    """
    known = set(extensions)
    creation_index: CreationIndex = {}

    for commit_index, commit in enumerate(commits):
        for action in commit.file_actions:
            path = action.new_path
            if path is None:
                continue
            if (
                action.change_type is ChangeType.ADD
                and file_extension(path) in known
                and path not in creation_index
            ):
                creation_index[path] = commit_index

    logger.debug("Creation index holds %d bunch files", len(creation_index))
    return creation_index
