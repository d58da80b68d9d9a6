"""
dirnotes/config.py

Configuration for the notes CLI.

There is one setting: where the database file lives. By default it is

    <home>/dev/notes/test.db

and the `DIRNOTES_DB_PATH` environment variable overrides it. Values from a
`.env` file are loaded by `load_settings()`, which `dirnotes.cli.main` calls
at import. A variable already set in the environment always wins.

The path is resolved on every call rather than at import time so tests (and
long-lived callers) see changes to the environment.
"""

import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from dirnotes.directory import get_home_dir

# Environment variable that overrides the database location
DB_PATH_ENV_VAR = "DIRNOTES_DB_PATH"

# Location of the database relative to the user's home directory
DEFAULT_DB_SUBPATH = Path("dev") / "notes" / "test.db"


def get_db_path() -> Path:
    """
    Resolve the database file location.

    Returns
    -------
    Path
        `DIRNOTES_DB_PATH` (with `~` expanded) when set and non-empty,
        otherwise the default path under the home directory.

    Raises
    ------
    NotesEnvironmentError
        If the default is needed and the home directory cannot be found.
    """
    override = os.getenv(DB_PATH_ENV_VAR)
    if override:
        return Path(override).expanduser()

    return get_home_dir() / DEFAULT_DB_SUBPATH


def load_settings(dotenv_path: Optional[Union[str, Path]] = None) -> bool:
    """
    Load settings from a `.env` file into the environment.

    With no path, python-dotenv searches upward for a `.env` file. Variables
    that are already set are left alone. Returns True if anything was found.
    """
    return load_dotenv(dotenv_path)
