"""Constants for task-id-hook.

Contains:
- TASK_GROUP_NAME: Name of the regex group that captures the task id
- COMMENT_MARKER: Start of the comment section in a commit message
- SUBJECT_BODY_SEPARATOR: Blank line between subject and body
- REDUNDANT_BLANK_LINES / BLANK_LINE: Artifact left by an empty body and its fix
- ESCAPED_NEWLINE: Newline as written in a hook argument
"""

TASK_GROUP_NAME = "task_template"

# The first line that starts with `#` begins the comment section
COMMENT_MARKER = "\n#"

SUBJECT_BODY_SEPARATOR = "\n\n"

# `{subject}\n\n{body}\n\n{task_id}` with an empty body leaves two blank lines
REDUNDANT_BLANK_LINES = "\n\n\n\n"
BLANK_LINE = "\n\n"

ESCAPED_NEWLINE = "\\n"
