"""
Directory resolution.

The current working directory is the partition key for every note
operation. It is read once per invocation and passed down unchanged: no
normalization, no symlink resolution.
"""

import os
from pathlib import Path

from dirnotes.errors import NotesEnvironmentError


def get_current_dir() -> str:
    """
    Return the absolute path of the process's current working directory.

    Raises
    ------
    NotesEnvironmentError
        If the operating system cannot report it, e.g. the directory was
        removed after the shell entered it.
    """
    try:
        return os.getcwd()
    except OSError as e:
        raise NotesEnvironmentError(f"Failed to get current directory: {e}") from e


def get_home_dir() -> Path:
    """Return the invoking user's home directory."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise NotesEnvironmentError(f"Failed to get home directory: {e}") from e
