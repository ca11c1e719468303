"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def message_file(temp_dir):
    """Commit message file as git writes it (with a trailing newline)."""
    path = temp_dir / "COMMIT_EDITMSG"
    path.write_text("Commit subject\n\nCommit body\n")
    return path


@pytest.fixture
def editor_message():
    """Commit message with the comment section git appends in the editor."""
    return (
        "Commit subject\n"
        "\n"
        "Commit body\n"
        "# Please enter the commit message for your changes. Lines starting\n"
        "# with '#' will be ignored, and an empty message aborts the commit.\n"
        "#\n"
        "# On branch feature/ABC-123-provide-tests\n"
    )


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run
