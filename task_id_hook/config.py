"""Hook settings.

Contains:
- HookSettings: Validated arguments of a hook run
"""

import re
from pathlib import Path

from pydantic import BaseModel, field_validator

from task_id_hook.task import InvalidTaskRegexError, compile_task_regex
from task_id_hook.template import expand_template


class HookSettings(BaseModel):
    """Arguments the hook was called with, ready to use.

    Attributes:
        task_regex: Compiled regex with a `task_template` group.
        message_template: Template with `\\n` escapes turned into newlines.
        message_file: Path of the commit message file git passed to the hook.
    """

    task_regex: re.Pattern
    message_template: str
    message_file: Path

    @field_validator("task_regex", mode="before")
    @classmethod
    def compile_regex(cls, v):
        """Compile the task regex, accepting `(?<name>...)` groups."""
        if isinstance(v, re.Pattern):
            return v
        try:
            return compile_task_regex(v)
        except InvalidTaskRegexError as e:
            raise ValueError(str(e))

    @field_validator("message_template")
    @classmethod
    def expand_escapes(cls, v: str) -> str:
        """Remove escaping from the template."""
        return expand_template(v)
