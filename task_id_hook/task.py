"""Task id extraction from branch names.

Contains:
- TaskIDError: Base exception for task id lookup
- TaskNotInBranchError: The branch does not match the task regex
- MissingTaskGroupError: The regex has no usable `task_template` group
- InvalidTaskRegexError: The task regex does not compile
- compile_task_regex: Compile the user supplied task regex
- extract_task_id: Get the task id from a branch name
- is_task_id_present: Check whether a message already mentions the task id
"""

import re

from task_id_hook.constants import TASK_GROUP_NAME


class TaskIDError(Exception):
    """Base exception for task id lookup errors."""

    pass


class TaskNotInBranchError(TaskIDError):
    """Raised when the branch name does not match the task regex.

    Expected on branches like `main` or `develop`.
    """

    pass


class MissingTaskGroupError(TaskIDError):
    """Raised when the task regex matched but has no `task_template` group."""

    pass


class InvalidTaskRegexError(TaskIDError):
    """Raised when the task regex is not a valid regular expression."""

    pass


# `(?<name>...)` as accepted by PCRE and Rust; lookbehinds are left alone.
# The preceding backslashes are captured: an odd run escapes the parenthesis.
_ANGLE_NAMED_GROUP = re.compile(r"(\\*)\(\?<(?![=!])")


def _to_python_named_group(match: re.Match) -> str:
    backslashes = match.group(1)
    if len(backslashes) % 2:
        return match.group(0)
    return backslashes + "(?P<"


def compile_task_regex(raw: str) -> re.Pattern:
    """Compile the task regex.

    Both `(?P<name>...)` and `(?<name>...)` spellings of a named group are
    accepted.

    Args:
        raw: The regex as given on the command line.

    Returns:
        The compiled pattern.

    Raises:
        InvalidTaskRegexError: If the regex cannot be compiled.
    """
    normalized = _ANGLE_NAMED_GROUP.sub(_to_python_named_group, raw)
    try:
        return re.compile(normalized)
    except re.error as e:
        raise InvalidTaskRegexError(f"Make sure task regex is correct: {e}")


def extract_task_id(branch: str, pattern: re.Pattern) -> str:
    """Return the task id found in the branch name.

    Args:
        branch: Name of the branch to retrieve the task id from.
        pattern: Compiled task regex with a `task_template` group.

    Returns:
        The text captured by the `task_template` group, unchanged.

    Raises:
        TaskNotInBranchError: If the pattern does not match the branch.
        MissingTaskGroupError: If the match has no `task_template` group.
    """
    match = pattern.search(branch)
    if match is None:
        raise TaskNotInBranchError(f"No task id in branch {branch!r}")

    if TASK_GROUP_NAME not in pattern.groupindex:
        raise MissingTaskGroupError(
            f"Make sure you included capturing group with name `{TASK_GROUP_NAME}`."
        )

    task_id = match.group(TASK_GROUP_NAME)
    if task_id is None:
        # Group exists but took no part in the match, e.g. `(?P<task_template>X)?`
        raise MissingTaskGroupError(
            f"Capturing group `{TASK_GROUP_NAME}` did not match anything."
        )
    return task_id


def is_task_id_present(subject: str, body: str, task_id: str) -> bool:
    """Check whether the task id is already in the commit message.

    Plain substring check, so `ABC-1` is also found inside `ABC-12`.
    """
    return task_id in subject or task_id in body
