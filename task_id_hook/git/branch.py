"""Current branch lookup.

Contains:
- BranchProvider: Callable type that returns the current branch name
- get_current_branch: Ask git for the checked-out branch
"""

from typing import Callable

from task_id_hook.git.runner import _run_git_command

# Anything that returns the branch name can stand in for git, e.g. in tests.
BranchProvider = Callable[[], str]


def get_current_branch() -> str:
    """Get the current branch name.

    Returns:
        The current branch name, or an empty string in detached HEAD state.

    Raises:
        GitError: If git is unavailable or this is not a repository.
    """
    return _run_git_command(["branch", "--show-current"])
