"""
Note commands for the dirnotes CLI.

Each command works on the notes stored under the current working directory:

    • notes            list (default when no subcommand is given)
    • notes list       list, explicit form
    • notes add ...    join the words with spaces and store them as one note
    • notes delete ID  delete one note, scoped to the current directory

The functions here are registered on the root Typer app in
`dirnotes.cli.main`. They share one pattern:

    1. argument parsing (Typer) rejects missing arguments
    2. `open_store()` resolves the database path and the current directory,
       opens the store, and registers it with the Click context for cleanup
    3. one store call
    4. one line of output per result

Any `NotesError` other than a delete's `NotFoundError` is fatal: it is
printed to stderr and the command exits with status 1.
"""

import re
from typing import List, NoReturn, Optional, Tuple

import typer

from dirnotes.config import get_db_path
from dirnotes.directory import get_current_dir
from dirnotes.errors import NotesError, NotFoundError
from dirnotes.logging_utils import log_debug, log_verbose
from dirnotes.store import NoteStore
from dirnotes.types import NoteStoreInterface

# ---------------------------------------------------------------------------
# Output lines
# ---------------------------------------------------------------------------
EMPTY_LIST_MESSAGE = "No notes in this directory"
NOTE_ADDED_MESSAGE = "Note added"
NOTE_DELETED_MESSAGE = "Note deleted"
NOTE_NOT_FOUND_MESSAGE = "No note with id {note_id}"

NOTE_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class CliState:
    """Options from the root callback, carried to subcommands on `ctx.obj`."""

    def __init__(self, verbose: bool = False, debug: bool = False) -> None:
        self.verbose = verbose or debug
        self.debug = debug


def _state(ctx: typer.Context) -> CliState:
    if isinstance(ctx.obj, CliState):
        return ctx.obj
    return CliState()


def fail(error: Exception) -> NoReturn:
    """Report a fatal error on stderr and exit with status 1."""
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Store lifecycle
# ---------------------------------------------------------------------------
# The store is registered with the Click context, which closes it when the
# command finishes, including when it finishes through typer.Exit.
# ---------------------------------------------------------------------------
def open_store(ctx: typer.Context) -> Tuple[NoteStoreInterface, str]:
    """
    Open the notes database and resolve the current directory.

    Returns
    -------
    (NoteStoreInterface, str)
        The open store (schema ensured) and the partition key for this run.

    Raises
    ------
    NotesError
        If the database path, the database itself, or the current directory
        cannot be resolved.
    """
    state = _state(ctx)

    db_path = get_db_path()
    log_verbose(f"Using database {db_path}", state.verbose)

    store = ctx.with_resource(NoteStore.open(db_path))

    directory = get_current_dir()
    log_verbose(f"Current directory {directory}", state.verbose)

    return store, directory


# ---------------------------------------------------------------------------
# Command: notes list
# ---------------------------------------------------------------------------
def list_notes(ctx: typer.Context) -> None:
    """List the notes stored for the current directory."""
    state = _state(ctx)

    try:
        store, directory = open_store(ctx)
        notes = store.list_notes(directory)
    except NotesError as e:
        fail(e)

    log_debug(f"list_notes returned {notes!r}", state.debug)

    if not notes:
        typer.echo(EMPTY_LIST_MESSAGE)
        return

    for note_id in sorted(notes):
        typer.echo(f"{note_id}: {notes[note_id]}")


# ---------------------------------------------------------------------------
# Command: notes add <word...>
# ---------------------------------------------------------------------------
# Registered with ignore_unknown_options so words such as "-j4" are kept as
# note text instead of being parsed as options.
# ---------------------------------------------------------------------------
def add_note(
    ctx: typer.Context,
    words: List[str] = typer.Argument(
        ...,
        metavar="TEXT...",
        help="Note text. Multiple words are joined with single spaces.",
    ),
) -> None:
    """Add a note to the current directory."""
    state = _state(ctx)

    text = " ".join(words)
    if not text.strip():
        raise typer.BadParameter("note text must not be empty", param_hint="'TEXT...'")

    try:
        store, directory = open_store(ctx)
        note_id = store.add_note(directory, text)
    except NotesError as e:
        fail(e)

    log_debug(f"add_note assigned id {note_id}", state.debug)
    typer.echo(NOTE_ADDED_MESSAGE)


# ---------------------------------------------------------------------------
# Command: notes delete <id>
# ---------------------------------------------------------------------------
# The id is taken as raw text. Anything that is not a plain integer cannot
# name a note, so it gets the same "No note with id" answer as a missing one.
# Registered with ignore_unknown_options so "-1" arrives here as an id.
# ---------------------------------------------------------------------------
def parse_note_id(raw: str) -> Optional[int]:
    """Return `raw` as an integer id, or None if it is not one."""
    if NOTE_ID_PATTERN.fullmatch(raw) is None:
        return None
    return int(raw)


def delete_note(
    ctx: typer.Context,
    raw_id: str = typer.Argument(
        ...,
        metavar="ID",
        help="Id of the note to delete, as shown by `notes list`.",
    ),
) -> None:
    """
    Delete a note from the current directory.

    An id that does not exist here, including one that belongs to another
    directory, is reported as "No note with id <id>" and is not an error.
    """
    state = _state(ctx)
    not_found = NOTE_NOT_FOUND_MESSAGE.format(note_id=raw_id)

    note_id = parse_note_id(raw_id)
    if note_id is None:
        log_debug(f"{raw_id!r} is not a note id", state.debug)
        typer.echo(not_found)
        return

    try:
        store, directory = open_store(ctx)
        store.delete_note(directory, note_id)
    except NotFoundError:
        log_debug(f"delete_note matched no rows for id {note_id}", state.debug)
        typer.echo(not_found)
        return
    except NotesError as e:
        fail(e)

    typer.echo(NOTE_DELETED_MESSAGE)
