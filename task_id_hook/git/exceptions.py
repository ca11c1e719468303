"""Git-related exception classes.

Contains:
- GitError: Base exception for git-related errors
- NonUtf8OutputError: Raised when git prints something that is not UTF-8
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NonUtf8OutputError(GitError):
    """Raised when git output cannot be decoded as UTF-8."""

    pass
