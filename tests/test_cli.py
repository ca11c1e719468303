"""Tests for task_id_hook.cli module."""

from typer.testing import CliRunner

from task_id_hook.cli import app
from task_id_hook.git import GitError


runner = CliRunner()

TEMPLATE = "{subject}\\n\\n{body}\\n\\n{task_id}"
TASK_REGEX = r"test/(?<task_template>ABC-\d+).*"


class TestHookCommand:
    """Tests for the task-id-hook command."""

    def test_updates_message_file(self, mocker, message_file):
        """Test that the task id is written to the message file."""
        mocker.patch("task_id_hook.cli.get_current_branch", return_value="test/ABC-111-test")

        result = runner.invoke(app, [TASK_REGEX, TEMPLATE, str(message_file)])

        assert result.exit_code == 0
        assert message_file.read_text() == "Commit subject\n\nCommit body\n\nABC-111"

    def test_branch_without_task_is_silent(self, mocker, message_file):
        """Test exit code and output on a branch without task id."""
        mocker.patch("task_id_hook.cli.get_current_branch", return_value="main")

        result = runner.invoke(app, [TASK_REGEX, TEMPLATE, str(message_file)])

        assert result.exit_code == 0
        assert result.output == ""
        assert message_file.read_text() == "Commit subject\n\nCommit body\n"

    def test_warns_about_missing_group(self, mocker, message_file):
        """Test warning when the regex has no named group."""
        mocker.patch("task_id_hook.cli.get_current_branch", return_value="test/ABC-111-test")

        result = runner.invoke(app, [r"test/(ABC-\d+).*", TEMPLATE, str(message_file)])

        assert result.exit_code == 0
        assert "WARNING" in result.output
        assert "task_template" in result.output
        assert message_file.read_text() == "Commit subject\n\nCommit body\n"

    def test_quiet_hides_warning(self, mocker, message_file):
        """Test that --quiet suppresses the missing group warning."""
        mocker.patch("task_id_hook.cli.get_current_branch", return_value="test/ABC-111-test")

        result = runner.invoke(app, ["--quiet", r"test/(ABC-\d+).*", TEMPLATE, str(message_file)])

        assert result.exit_code == 0
        assert "WARNING" not in result.output

    def test_git_error_exits_with_error(self, mocker, message_file):
        """Test handling of git error."""
        mocker.patch(
            "task_id_hook.cli.get_current_branch",
            side_effect=GitError("Git is not installed or not in PATH."),
        )

        result = runner.invoke(app, [TASK_REGEX, TEMPLATE, str(message_file)])

        assert result.exit_code == 1
        assert "git error" in result.output.lower()

    def test_invalid_regex_exits_with_error(self, mocker, message_file):
        """Test handling of an invalid task regex."""
        mocker.patch("task_id_hook.cli.get_current_branch", return_value="test/ABC-111-test")

        result = runner.invoke(app, [r"test/(?<task_template>ABC-\d+", TEMPLATE, str(message_file)])

        assert result.exit_code == 1
        assert "task regex is correct" in result.output

    def test_bad_template_exits_with_error(self, mocker, message_file):
        """Test handling of a malformed template."""
        mocker.patch("task_id_hook.cli.get_current_branch", return_value="test/ABC-111-test")

        result = runner.invoke(app, [TASK_REGEX, "{subject", str(message_file)])

        assert result.exit_code == 1
        assert "Message template is incorrect" in result.output
        assert message_file.read_text() == "Commit subject\n\nCommit body\n"

    def test_unwritable_file_exits_with_error(self, mocker, temp_dir):
        """Test handling of a message file that cannot be written."""
        mocker.patch("task_id_hook.cli.get_current_branch", return_value="test/ABC-111-test")
        path = temp_dir / "missing-dir" / "COMMIT_EDITMSG"

        result = runner.invoke(app, [TASK_REGEX, TEMPLATE, str(path)])

        assert result.exit_code == 1
        assert "Unable to write" in result.output

    def test_requires_three_arguments(self):
        """Test that missing arguments are a usage error."""
        result = runner.invoke(app, [TASK_REGEX, TEMPLATE])

        assert result.exit_code != 0

    def test_version(self):
        """Test --version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "task-id-hook" in result.output
