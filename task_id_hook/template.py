"""Commit message template rendering.

Templates are format strings with three placeholders, e.g.

    {subject}\\n\\n{body}\\n\\n{task_id}

Contains:
- Placeholder: The placeholders a template may use
- TemplateError: Raised for malformed templates
- expand_template: Turn escaped `\\n` sequences into newlines
- validate_template: Check template syntax and placeholder names
- render_commit_message: Build the new commit message
"""

import string
from enum import Enum

from task_id_hook.constants import BLANK_LINE, ESCAPED_NEWLINE, REDUNDANT_BLANK_LINES


class Placeholder(Enum):
    """Placeholders available in a commit message template."""

    SUBJECT = "subject"
    BODY = "body"
    TASK_ID = "task_id"


PLACEHOLDER_NAMES = [p.value for p in Placeholder]


class TemplateError(Exception):
    """Raised when the commit message template is malformed."""

    pass


def _template_error(detail: str) -> TemplateError:
    names = ", ".join(f"`{name}`" for name in PLACEHOLDER_NAMES)
    return TemplateError(
        f"Message template is incorrect ({detail}). "
        f"It must contain {names} placeholders."
    )


def expand_template(raw: str) -> str:
    """Replace the two-character sequence `\\n` with a real newline."""
    return raw.replace(ESCAPED_NEWLINE, "\n")


def validate_template(template: str) -> None:
    """Check that the template is a well-formed format string.

    A template is not required to use every placeholder, but every field it
    does use must be one of them. `{{` and `}}` produce literal braces.

    Args:
        template: The expanded template.

    Raises:
        TemplateError: On unbalanced braces, positional fields or unknown names.
    """
    try:
        fields = list(string.Formatter().parse(template))
    except ValueError as e:
        raise _template_error(str(e))

    for _, field_name, _, _ in fields:
        if field_name is None:
            continue
        if field_name not in PLACEHOLDER_NAMES:
            raise _template_error(f"unknown placeholder {{{field_name}}}")


def render_commit_message(
    template: str,
    subject: str,
    body: str,
    task_id: str,
) -> str:
    """Render the commit message from the template.

    Args:
        template: Template with placeholders, escapes already expanded.
        subject: Subject of the commit message.
        body: Body of the commit message, may be empty.
        task_id: Task id to put into the message.

    Returns:
        The new commit message.

    Raises:
        TemplateError: If the template is malformed.
    """
    validate_template(template)

    values = {
        Placeholder.SUBJECT: subject,
        Placeholder.BODY: body,
        Placeholder.TASK_ID: task_id,
    }
    try:
        message = template.format_map(
            {placeholder.value: value for placeholder, value in values.items()}
        )
    except (KeyError, IndexError, ValueError) as e:
        # Nested fields inside a format spec are not seen by validate_template
        raise _template_error(str(e))

    # An empty body leaves two blank lines between subject and task id
    return message.replace(REDUNDANT_BLANK_LINES, BLANK_LINE)
