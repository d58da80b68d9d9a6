"""
SQLite-backed storage for directory-scoped notes.

`NoteStore` owns one connection to a single database file and exposes the
four statements the tool needs:

    • ensure_schema()                  CREATE TABLE IF NOT EXISTS
    • add_note(directory, text)        INSERT
    • delete_note(directory, note_id)  DELETE ... WHERE id = ? AND dir = ?
    • list_notes(directory)            SELECT ... WHERE dir = ?

There is no caching: every call goes to the database. Errors from sqlite3
are re-raised as `StorageError`, and a delete that matches nothing raises
`NotFoundError` so callers can tell "nothing to delete" apart from a failure.

Directory names and note text may carry bytes that are not valid UTF-8
(Python hands them over as surrogate escapes). They are stored with those
bytes spelled out as `\\xNN` escapes, the same way on every operation, so a
partition key always matches itself.

The store is a context manager. The CLI opens one per invocation and relies
on `__exit__` (via the Click context) to close it on every exit path.
"""

import sqlite3
from pathlib import Path
from typing import Optional, Union

from dirnotes.errors import NotFoundError, StorageError
from dirnotes.types import NoteMap

# SQLite INTEGER is a signed 64-bit value
MIN_NOTE_ID = -(2**63)
MAX_NOTE_ID = 2**63 - 1

# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------
# AUTOINCREMENT keeps ids from being reused after the highest row is deleted.
# ---------------------------------------------------------------------------
CREATE_NOTES_TABLE = """
CREATE TABLE IF NOT EXISTS notes (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    dir TEXT NOT NULL,
    note TEXT NOT NULL
)
"""

INSERT_NOTE = "INSERT INTO notes (dir, note) VALUES (?, ?)"

DELETE_NOTE = "DELETE FROM notes WHERE id = ? AND dir = ?"

SELECT_DIR_NOTES = "SELECT id, note FROM notes WHERE dir = ? ORDER BY id"


def encode_text(value: str) -> str:
    """
    Make `value` storable as SQLite TEXT without losing information.

    Valid text is returned unchanged. Undecodable bytes smuggled in as
    surrogate escapes (from `os.getcwd()` or `sys.argv`) are spelled out as
    `\\xNN`. The same name always produces the same key.
    """
    return value.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


class NoteStore:
    """
    A thin wrapper around a SQLite connection holding the `notes` table.

    Parameters
    ----------
    db_path : str | Path
        Location of the database file. Parent directories are created if
        they do not exist. The special value ":memory:" opens a private
        in-memory database.

    Raises
    ------
    StorageError
        If the parent directory cannot be created or the file cannot be
        opened.
    """

    def __init__(self, db_path: Union[str, Path]) -> None:
        self.db_path = str(db_path)
        self._conn: Optional[sqlite3.Connection] = None

        try:
            if self.db_path != ":memory:":
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(self.db_path)
        except (sqlite3.Error, OSError) as e:
            raise StorageError(f"Failed to open database {self.db_path}: {e}") from e

    @classmethod
    def open(cls, db_path: Union[str, Path]) -> "NoteStore":
        """Open the database at `db_path` and make sure the schema exists."""
        store = cls(db_path)
        try:
            store.ensure_schema()
        except StorageError:
            store.close()
            raise
        return store

    # -----------------------------------------------------------------------
    # Context manager
    # -----------------------------------------------------------------------

    def __enter__(self) -> "NoteStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the connection. Calling this more than once is harmless."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _require_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError(f"Database {self.db_path} is closed")
        return self._conn

    # -----------------------------------------------------------------------
    # Schema
    # -----------------------------------------------------------------------

    def ensure_schema(self) -> None:
        """
        Create the `notes` table if it does not already exist.

        Safe to call on every startup. A corrupt file or a read-only location
        surfaces here as `StorageError`.
        """
        conn = self._require_conn()
        try:
            with conn:
                conn.execute(CREATE_NOTES_TABLE)
        except sqlite3.Error as e:
            raise StorageError(f"Failed to create table: {e}") from e

    # -----------------------------------------------------------------------
    # Notes
    # -----------------------------------------------------------------------

    def add_note(self, directory: str, text: str) -> int:
        """
        Insert a note under `directory` and return its id.

        The text is stored as given; rejecting empty notes is the CLI's job.
        """
        conn = self._require_conn()
        try:
            with conn:
                cursor = conn.execute(
                    INSERT_NOTE, (encode_text(directory), encode_text(text))
                )
        except (sqlite3.Error, UnicodeError) as e:
            raise StorageError(f"Failed to add note: {e}") from e

        return int(cursor.lastrowid)

    def delete_note(self, directory: str, note_id: int) -> None:
        """
        Delete the note with `note_id` stored under `directory`.

        Both values must match. A correct id under another directory is
        treated exactly like a missing id, and so is an id outside SQLite's
        integer range.

        Raises
        ------
        NotFoundError
            If no row matched.
        StorageError
            If the statement failed.
        """
        if not MIN_NOTE_ID <= note_id <= MAX_NOTE_ID:
            raise NotFoundError(note_id, directory)

        conn = self._require_conn()
        try:
            with conn:
                cursor = conn.execute(DELETE_NOTE, (note_id, encode_text(directory)))
        except (sqlite3.Error, UnicodeError) as e:
            raise StorageError(f"Failed to delete note: {e}") from e

        if cursor.rowcount == 0:
            raise NotFoundError(note_id, directory)

    def list_notes(self, directory: str) -> NoteMap:
        """
        Return every note stored under `directory` as a mapping of id to text.

        `directory` is compared by plain string equality, so "/a/b" and
        "/a/b/" are different partitions. An empty dict means the directory
        has no notes.
        """
        conn = self._require_conn()
        try:
            rows = conn.execute(SELECT_DIR_NOTES, (encode_text(directory),)).fetchall()
        except (sqlite3.Error, UnicodeError) as e:
            raise StorageError(f"Failed to query notes: {e}") from e

        return {int(note_id): note for note_id, note in rows}
