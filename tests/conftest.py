"""Shared test fixtures for bunch-check tests."""

import shutil
import subprocess
from pathlib import Path

import pytest

from bunch_check.git.models import ChangeType, CommitInfo, FileAction


def make_commit(sha, *actions, title=None, author="amy", committer="amy"):
    """Create a test commit from (ChangeType, path) pairs."""
    file_actions = []
    for change_type, path in actions:
        if change_type is ChangeType.DELETE:
            file_actions.append(FileAction(change_type, old_path=path))
        else:
            file_actions.append(FileAction(change_type, new_path=path))
    return CommitInfo(
        hash=sha,
        title=title or f"Commit {sha}",
        author=author,
        committer=committer,
        file_actions=tuple(file_actions),
    )


def write_files(root: Path, files: dict) -> None:
    """Write {relative_path: content} under root, creating directories."""
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)


class GitRepo:
    """Minimal driver for a throwaway git repository."""

    def __init__(self, path: Path):
        self.path = path
        self.path.mkdir(parents=True, exist_ok=True)
        self.git("init", "-q")
        self.git("config", "user.email", "test@test.com")
        self.git("config", "user.name", "Test")
        self.git("config", "commit.gpgsign", "false")

    def git(self, *args, env=None) -> str:
        result = subprocess.run(
            ["git", "-C", str(self.path), *args],
            capture_output=True,
            text=True,
            check=True,
            env=env,
        )
        return result.stdout.strip()

    def commit(self, message, files=None, remove=(), env=None):
        """Write files, remove paths, and commit everything. Returns the new sha."""
        write_files(self.path, files or {})
        for rel_path in remove:
            self.git("rm", "-q", rel_path)
        self.git("add", "-A")
        self.git("commit", "-q", "--allow-empty", "-m", message, env=env)
        return self.git("rev-parse", "HEAD")


@pytest.fixture
def git_repo(tmp_path):
    """An empty git repository in a temporary directory."""
    if shutil.which("git") is None:
        pytest.skip("git not found")
    return GitRepo(tmp_path / "repo")
