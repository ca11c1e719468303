"""Git access for task-id-hook.

- exceptions: GitError, NonUtf8OutputError
- runner: _run_git_command
- branch: BranchProvider, get_current_branch
"""

from task_id_hook.git.exceptions import (
    GitError,
    NonUtf8OutputError,
)

from task_id_hook.git.runner import _run_git_command

from task_id_hook.git.branch import (
    BranchProvider,
    get_current_branch,
)


__all__ = [
    # Exceptions
    "GitError",
    "NonUtf8OutputError",
    # Runner
    "_run_git_command",
    # Branch
    "BranchProvider",
    "get_current_branch",
]
