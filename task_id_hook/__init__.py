"""Put the task id from the branch name into the commit message."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("task-id-hook")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
