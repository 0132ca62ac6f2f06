"""Deletion state of bunch files.

An empty (or whitespace-only) bunch file marks a variant that was
intentionally dropped for its branch.
"""

from __future__ import annotations

from pathlib import Path

from ..exceptions import FileAccessError
from ..logging_config import get_logger

logger = get_logger(__name__)

# Code points 0x00-0x20: control characters and space
_BLANKS = "".join(map(chr, range(33)))


def is_deleted_bunch_file(path: str | Path) -> bool:
    """Return True iff ``path`` exists and holds nothing but blanks.

    Blanks are ASCII control characters and space; non-breaking spaces and
    undecodable bytes count as content.

    Raises:
        FileAccessError: If the file exists but cannot be read
    """
    path = Path(path)
    if not path.exists():
        return False

    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileAccessError(path, str(e))

    return not text.strip(_BLANKS)


class DeletionCache:
    """Memoized deletion state of bunch files under one repository root.

    File contents are assumed stable for the duration of a run, so one
    cache serves every commit of that run.
    """

    def __init__(self, root: str | Path):
        self._root = Path(root)
        self._states: dict[str, bool] = {}

    def is_deleted(self, bunch_file_path: str) -> bool:
        """Get or compute the deletion state of a root-relative path."""
        state = self._states.get(bunch_file_path)
        if state is None:
            state = is_deleted_bunch_file(self._root / bunch_file_path)
            self._states[bunch_file_path] = state
        else:
            logger.debug("Deletion state cache hit for %s", bunch_file_path)
        return state

    def __contains__(self, bunch_file_path: str) -> bool:
        return bunch_file_path in self._states

    def __len__(self) -> int:
        return len(self._states)
