"""CLI entry point for task-id-hook.

Meant to be installed as a `commit-msg` hook, e.g. through pre-commit:

    task-id-hook 'feature/(?P<task_template>ABC-\\d+).*' \\
        '{subject}\\n\\n{body}\\n\\n{task_id}' .git/COMMIT_EDITMSG
"""

from typing import Optional

import typer
from pydantic import ValidationError

from task_id_hook import __version__
from task_id_hook.constants import TASK_GROUP_NAME
from task_id_hook.git import GitError, get_current_branch
from task_id_hook.hook import HookOutcome, run_hook
from task_id_hook.message import MessageFileError
from task_id_hook.template import TemplateError


app = typer.Typer(
    name="task-id-hook",
    help="Put the task id from the branch name into the commit message",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"task-id-hook {__version__}")
        raise typer.Exit(0)


def _format_validation_error(error: ValidationError) -> str:
    """Turn pydantic errors into one line per bad argument."""
    lines = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"])
        lines.append(f"{field}: {err['msg']}")
    return "\n".join(lines)


@app.command()
def hook_command(
    task_regex: str = typer.Argument(
        ...,
        help=f"Regex with a named capturing group `{TASK_GROUP_NAME}`",
    ),
    commit_message_template: str = typer.Argument(
        ...,
        help="Template with {subject}, {body} and {task_id} placeholders, `\\n` is a newline",
    ),
    commit_message_file: str = typer.Argument(
        ...,
        help="Commit message file passed by git",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Do not warn about a task regex without the named group",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Add the task id from the current branch name to the commit message."""
    try:
        outcome = run_hook(
            task_regex,
            commit_message_template,
            commit_message_file,
            branch_provider=get_current_branch,
        )
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except ValidationError as e:
        typer.echo(f"Invalid arguments:\n{_format_validation_error(e)}", err=True)
        raise typer.Exit(1)
    except TemplateError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    except MessageFileError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    if outcome is HookOutcome.MISSING_TASK_GROUP and not quiet:
        typer.echo(
            f"WARNING: Make sure you included capturing group with name "
            f"`{TASK_GROUP_NAME}`. Commit message was not changed.",
            err=True,
        )


def main() -> None:
    """Console script entry point."""
    app()
