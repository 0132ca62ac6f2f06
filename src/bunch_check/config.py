"""Settings and extension loading for bunch-check.

Settings sources are merged in priority order:
    1. Defaults (defined in CheckSettings)
    2. Environment variables (BUNCH_* prefix)
    3. CLI overrides (passed as kwargs)

The list of bunch extensions comes from the ``--ext`` option when given,
otherwise from the ``.bunch`` file at the repository root.

Example:
    >>> settings = load_settings(".", "HEAD", "HEAD~10", extensions="as32,kt183")
    >>> resolve_extensions(settings)
    ('as32', 'kt183')
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, get_type_hints

from .exceptions import BunchFileError, InvalidConfigError
from .logging_config import get_logger

logger = get_logger(__name__)

BUNCH_FILE_NAME = ".bunch"


@dataclass(frozen=True)
class CheckSettings:
    """Immutable settings for one check run.

    Attributes:
        repo_path: Repository root; bunch files are looked up relative to it
        since_ref: Most recent commit to check (inclusive)
        until_ref: Parent of the oldest commit to check (exclusive)
        extensions: Comma-separated extensions, or None to read the .bunch file
        detect_renames: Report renames as RENAME actions instead of DELETE + ADD
        git_timeout_seconds: Upper bound for the git log subprocess
    """

    repo_path: str
    since_ref: str
    until_ref: str
    extensions: Optional[str] = None
    detect_renames: bool = True
    git_timeout_seconds: int = 60

    def __post_init__(self) -> None:
        if not self.since_ref:
            raise InvalidConfigError("since_ref", self.since_ref, "must not be empty")
        if not self.until_ref:
            raise InvalidConfigError("until_ref", self.until_ref, "must not be empty")
        if self.git_timeout_seconds <= 0:
            raise InvalidConfigError(
                "git_timeout_seconds", self.git_timeout_seconds, "must be positive"
            )


def load_settings(repo_path: str | Path, since_ref: str, until_ref: str, **overrides) -> CheckSettings:
    """Build settings from defaults, BUNCH_* environment variables and overrides.

    Overrides whose value is None are ignored so CLI options left unset do
    not mask environment variables.

    Raises:
        InvalidConfigError: If a value cannot be parsed or is out of range
    """
    merged: dict[str, Any] = {}
    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return CheckSettings(
            repo_path=str(repo_path), since_ref=since_ref, until_ref=until_ref, **merged
        )
    except TypeError as e:
        raise InvalidConfigError("settings", overrides, str(e))


def _load_env_vars() -> dict[str, Any]:
    """Load settings from BUNCH_* environment variables.

    Supported environment variables:
        BUNCH_EXTENSIONS: str (comma-separated)
        BUNCH_DETECT_RENAMES: bool (true/false/1/0)
        BUNCH_GIT_TIMEOUT_SECONDS: int
    """
    type_hints = get_type_hints(CheckSettings)
    result: dict[str, Any] = {}

    for field_name in ("extensions", "detect_renames", "git_timeout_seconds"):
        env_key = f"BUNCH_{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    return value


def parse_extensions(raw: str) -> tuple[str, ...]:
    """Split a comma-separated extension list.

    Blank items are dropped and duplicates keep their first position.

    Raises:
        InvalidConfigError: If no extension remains
    """
    extensions: list[str] = []
    for item in raw.split(","):
        item = item.strip()
        if item and item not in extensions:
            extensions.append(item)

    if not extensions:
        raise InvalidConfigError("extensions", raw, "at least one extension is required")
    return tuple(extensions)


def read_extensions_from_file(repo_path: str | Path) -> tuple[str, ...]:
    """Read extensions from the .bunch file at the repository root.

    The first non-blank line names the base branch. Every following line is
    a rule such as ``as32_as31``; its first ``_``-separated token is the
    extension.

    Raises:
        BunchFileError: If the file is missing, unreadable or has no rules
    """
    path = Path(repo_path) / BUNCH_FILE_NAME
    if not path.exists():
        raise BunchFileError(path, "file doesn't exist")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise BunchFileError(path, str(e))

    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if len(lines) <= 1:
        raise BunchFileError(path, "there should be at least two lines")

    extensions: list[str] = []
    for rule in lines[1:]:
        extension = rule.split("_")[0]
        if extension and extension not in extensions:
            extensions.append(extension)

    if not extensions:
        raise BunchFileError(path, "no extensions found")

    logger.debug("Base branch %s, extensions from %s: %s", lines[0], path, extensions)
    return tuple(extensions)


def resolve_extensions(settings: CheckSettings) -> tuple[str, ...]:
    """Return the extensions for a run: explicit list first, .bunch file otherwise."""
    if settings.extensions is not None:
        return parse_extensions(settings.extensions)
    return read_extensions_from_file(settings.repo_path)
