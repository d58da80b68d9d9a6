"""
Directory-scoped notes.

`dirnotes` stores short text notes keyed to the directory the command was run
from. The public surface is small:

    from dirnotes.store import NoteStore
    from dirnotes.errors import NotesError, StorageError, NotFoundError

The command-line entry point lives in `dirnotes.cli.main`.
"""

__version__ = "0.1.0"
