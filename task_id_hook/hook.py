"""Putting the task id into the commit message.

Contains:
- HookOutcome: How a hook run ended
- provide_task_id_into_commit: Rewrite the message file for a known branch
- run_hook: Validate arguments, look up the branch and run the hook
"""

from enum import Enum
from pathlib import Path
from typing import Union

from task_id_hook.config import HookSettings
from task_id_hook.git import BranchProvider, get_current_branch
from task_id_hook.message import (
    read_commit_message,
    split_message,
    write_commit_message,
)
from task_id_hook.task import (
    MissingTaskGroupError,
    TaskNotInBranchError,
    extract_task_id,
    is_task_id_present,
)
from task_id_hook.template import render_commit_message


class HookOutcome(Enum):
    """Result of a hook run that did not fail."""

    NOT_IN_BRANCH = "not_in_branch"
    MISSING_TASK_GROUP = "missing_task_group"
    ALREADY_PRESENT = "already_present"
    UPDATED = "updated"


def provide_task_id_into_commit(settings: HookSettings, branch_name: str) -> HookOutcome:
    """Put the task id from the branch name into the commit message file.

    The file is only written when the task id was found in the branch and is
    not yet part of the message, so running the hook twice changes nothing.

    Args:
        settings: Validated hook arguments.
        branch_name: Name of the checked-out branch.

    Returns:
        The outcome of the run.

    Raises:
        TemplateError: If the message template is malformed.
        MessageFileError: If the message file cannot be read or written.
    """
    commit_message = read_commit_message(settings.message_file).strip()
    subject, body = split_message(commit_message)

    try:
        task_id = extract_task_id(branch_name, settings.task_regex)
    except TaskNotInBranchError:
        # Probably `main` or `develop`, nothing to do
        return HookOutcome.NOT_IN_BRANCH
    except MissingTaskGroupError:
        return HookOutcome.MISSING_TASK_GROUP

    if is_task_id_present(subject, body, task_id):
        return HookOutcome.ALREADY_PRESENT

    updated_message = render_commit_message(
        settings.message_template,
        subject,
        body,
        task_id,
    )
    write_commit_message(settings.message_file, updated_message)
    return HookOutcome.UPDATED


def run_hook(
    task_regex: str,
    message_template: str,
    message_file: Union[str, Path],
    branch_provider: BranchProvider = get_current_branch,
) -> HookOutcome:
    """Run the hook with raw command line arguments.

    Args:
        task_regex: Regex with a `task_template` named group.
        message_template: Template with `{subject}`, `{body}` and `{task_id}`.
        message_file: Path to the commit message file.
        branch_provider: Returns the current branch name. Defaults to git.

    Returns:
        The outcome of the run.

    Raises:
        pydantic.ValidationError: If the task regex is invalid.
        GitError: If the branch name cannot be determined.
        TemplateError: If the message template is malformed.
        MessageFileError: If the message file cannot be read or written.
    """
    branch_name = branch_provider()
    settings = HookSettings(
        task_regex=task_regex,
        message_template=message_template,
        message_file=message_file,
    )
    return provide_task_id_into_commit(settings, branch_name)
