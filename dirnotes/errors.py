"""
dirnotes/errors.py

Exception hierarchy shared by the store, the directory resolver, and the CLI.

Every error raised on purpose by this package derives from `NotesError`, so
the CLI can catch one type and turn it into a diagnostic plus exit status 1.
The single exception to that rule is `NotFoundError`: a delete that matched
nothing is an ordinary outcome and is reported as a normal message.

Usage errors (missing note text, missing id, unknown subcommand) are not
modelled here. Typer rejects them while parsing arguments, before the store
is opened.
"""

from typing import Optional


class NotesError(Exception):
    """Base class for all dirnotes errors."""


class NotesEnvironmentError(NotesError):
    """
    The process environment cannot supply a required location.

    Raised when the home directory or the current working directory cannot be
    determined (for example, the cwd was removed after the shell entered it).
    """


class StorageError(NotesError):
    """
    The database file could not be opened, or a statement failed.

    The underlying `sqlite3.Error` or `OSError` is always chained as
    `__cause__`.
    """


class NotFoundError(NotesError):
    """
    A delete matched zero rows for the given id and directory.

    Attributes
    ----------
    note_id : int
        The id that was requested.
    directory : str | None
        The directory the delete was scoped to.
    """

    def __init__(self, note_id: int, directory: Optional[str] = None) -> None:
        self.note_id = note_id
        self.directory = directory
        super().__init__(f"No note with id {note_id}")
