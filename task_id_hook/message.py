"""Commit message parsing and the message file.

Contains:
- MessageFileError: Raised when the message file cannot be read or written
- split_message: Split a message into subject and body
- read_commit_message: Read the message file (missing file is empty)
- write_commit_message: Overwrite the message file
"""

from pathlib import Path

from task_id_hook.constants import COMMENT_MARKER, SUBJECT_BODY_SEPARATOR


class MessageFileError(Exception):
    """Raised when the commit message file cannot be read or written."""

    pass


def split_message(raw: str) -> tuple[str, str]:
    """Return subject and body of a commit message.

    Everything from the first line starting with `#` onwards is the comment
    section and is dropped. The subject ends at the first blank line; the body
    is the rest and may contain blank lines of its own.

    Args:
        raw: The commit message as written by the editor.

    Returns:
        Tuple of (subject, body). Body is empty if there is no blank line.
    """
    end = raw.find(COMMENT_MARKER)
    if end != -1:
        raw = raw[:end]

    subject, separator, body = raw.partition(SUBJECT_BODY_SEPARATOR)
    if not separator:
        return raw, ""
    return subject, body


def read_commit_message(path: Path) -> str:
    """Read the commit message file.

    Bytes that are not valid UTF-8 are kept as surrogates and line endings
    are not translated, so writing the text back reproduces the file.

    Args:
        path: Path to the file git passes to the commit-msg hook.

    Returns:
        The file contents, or an empty string if the file does not exist.

    Raises:
        MessageFileError: If the file exists but cannot be read.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
            return f.read()
    except FileNotFoundError:
        return ""
    except OSError as e:
        raise MessageFileError(f"Unable to read commit message from {path}: {e}")


def write_commit_message(path: Path, message: str) -> None:
    """Overwrite the commit message file with a new message.

    Args:
        path: Path to the commit message file.
        message: The full new message. Written as is, no newline is appended.

    Raises:
        MessageFileError: If the file cannot be opened or written.
    """
    try:
        with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
            f.write(message)
    except OSError as e:
        raise MessageFileError(f"Unable to write commit message to {path}: {e}")
