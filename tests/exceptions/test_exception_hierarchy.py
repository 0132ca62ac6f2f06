"""Tests for the exception hierarchy."""

from pathlib import Path

from bunch_check.exceptions import (
    AnalysisError,
    BunchCheckError,
    BunchFileError,
    ConfigurationError,
    FileAccessError,
    GitError,
    InvalidConfigError,
)


class TestBunchCheckError:
    def test_message_only(self):
        assert str(BunchCheckError("boom")) == "boom"

    def test_details_are_rendered(self):
        error = BunchCheckError("boom", details={"a": "1", "b": "2"})
        assert str(error) == "boom (a=1, b=2)"


class TestHierarchy:
    def test_configuration_errors(self):
        assert issubclass(InvalidConfigError, ConfigurationError)
        assert issubclass(BunchFileError, ConfigurationError)
        assert issubclass(ConfigurationError, BunchCheckError)

    def test_analysis_errors(self):
        assert issubclass(FileAccessError, AnalysisError)
        assert issubclass(AnalysisError, BunchCheckError)
        assert issubclass(GitError, BunchCheckError)

    def test_bunch_file_error_fields(self):
        error = BunchFileError(Path("/repo/.bunch"), "file doesn't exist")
        assert error.reason == "file doesn't exist"
        assert error.details["path"] == str(Path("/repo/.bunch"))

    def test_git_error_details(self):
        error = GitError("bad revision", command=["git", "log"], returncode=128)
        assert error.returncode == 128
        assert "command=git log" in str(error)
        assert "returncode=128" in str(error)
