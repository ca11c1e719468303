"""Git command runner.

Contains:
- _run_git_command: Run a git command and return its decoded output
"""

import subprocess

from task_id_hook.git.exceptions import GitError, NonUtf8OutputError


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    The output is captured as bytes and decoded strictly, so that a branch
    name with broken encoding is reported instead of silently mangled.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command with surrounding whitespace removed.

    Raises:
        GitError: If git is missing or the command fails.
        NonUtf8OutputError: If the output is not valid UTF-8.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitError(
            "Git is not installed or not in PATH. Make sure git is installed "
            "and git repo exists. Also make sure that stage for this hook is "
            "`commit-msg`."
        )

    try:
        return result.stdout.decode("utf-8").strip()
    except UnicodeDecodeError:
        raise NonUtf8OutputError("Got non utf-8 chars from git.")
