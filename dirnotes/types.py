"""
dirnotes/types.py

Shared type definitions for the store and the CLI.

Keeping these in one place gives the CLI and the tests a single contract for
what a store returns, independent of the SQLite implementation behind it.
"""

from typing import Dict, Protocol

# ---------------------------------------------------------------------------
# NoteMap
# ---------------------------------------------------------------------------
# The result of listing one directory: note id -> note text.
# Iteration order is not part of the contract.
# ---------------------------------------------------------------------------
NoteMap = Dict[int, str]


# ---------------------------------------------------------------------------
# NoteStoreInterface
# ---------------------------------------------------------------------------
# The surface the CLI commands rely on. `NoteStore` satisfies it.
# ---------------------------------------------------------------------------
class NoteStoreInterface(Protocol):
    def ensure_schema(self) -> None: ...

    def add_note(self, directory: str, text: str) -> int: ...

    def delete_note(self, directory: str, note_id: int) -> None: ...

    def list_notes(self, directory: str) -> NoteMap: ...

    def close(self) -> None: ...
