"""
Unit tests for NoteStore.

These tests talk to a real SQLite file under tmp_path and verify:
    - schema creation is idempotent,
    - notes are partitioned by exact directory string,
    - deletes are scoped to id AND directory,
    - ids are never reused,
    - sqlite failures surface as StorageError.
"""

import sqlite3

import pytest

from dirnotes.errors import NotFoundError, StorageError
from dirnotes.store import NoteStore, encode_text


# =====================================================================
# Schema
# =====================================================================


def test_ensure_schema_twice_creates_one_table(db_path) -> None:
    with NoteStore(db_path) as store:
        store.ensure_schema()
        store.ensure_schema()

    conn = sqlite3.connect(db_path)
    try:
        tables = conn.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'notes'"
        ).fetchall()
    finally:
        conn.close()

    assert tables == [("notes",)]


def test_open_creates_missing_parent_directories(tmp_path) -> None:
    path = tmp_path / "a" / "b" / "c" / "notes.db"

    with NoteStore.open(path):
        pass

    assert path.exists()


def test_open_keeps_existing_notes(db_path) -> None:
    with NoteStore.open(db_path) as store:
        store.add_note("/work", "persist me")

    with NoteStore.open(db_path) as store:
        assert list(store.list_notes("/work").values()) == ["persist me"]


def test_corrupt_file_raises_storage_error(tmp_path) -> None:
    path = tmp_path / "corrupt.db"
    path.write_bytes(b"this is not a sqlite database" * 100)

    with pytest.raises(StorageError, match="Failed to create table"):
        NoteStore.open(path)


def test_unopenable_path_raises_storage_error(tmp_path) -> None:
    # A directory cannot be opened as a database file.
    path = tmp_path / "is_a_dir"
    path.mkdir()

    with pytest.raises(StorageError):
        NoteStore.open(path)


# =====================================================================
# Add / list
# =====================================================================


def test_add_then_list_round_trip(store) -> None:
    store.add_note("/home/user/project", "buy milk")

    notes = store.list_notes("/home/user/project")

    assert len(notes) == 1
    assert list(notes.values()) == ["buy milk"]


def test_add_returns_the_assigned_id(store) -> None:
    note_id = store.add_note("/work", "first")

    assert store.list_notes("/work") == {note_id: "first"}


def test_list_empty_store_returns_empty_mapping(store) -> None:
    assert store.list_notes("/anything") == {}


def test_notes_do_not_leak_between_directories(store) -> None:
    store.add_note("/d1", "only in d1")

    assert store.list_notes("/d2") == {}
    assert list(store.list_notes("/d1").values()) == ["only in d1"]


def test_directory_match_is_exact_string_equality(store) -> None:
    store.add_note("/a/b", "no trailing slash")

    assert store.list_notes("/a/b/") == {}


def test_ids_are_unique_across_directories(store) -> None:
    first = store.add_note("/d1", "one")
    second = store.add_note("/d2", "two")
    third = store.add_note("/d1", "three")

    assert len({first, second, third}) == 3
    assert set(store.list_notes("/d1")) == {first, third}


def test_add_stores_text_verbatim(store) -> None:
    text = "  spaces, 'quotes'; DROP TABLE notes; -- ünïcode  "
    store.add_note("/work", text)

    assert list(store.list_notes("/work").values()) == [text]


# =====================================================================
# Delete
# =====================================================================


def test_delete_removes_note(store) -> None:
    note_id = store.add_note("/work", "temporary")
    store.add_note("/work", "keep")

    store.delete_note("/work", note_id)

    assert list(store.list_notes("/work").values()) == ["keep"]


def test_delete_missing_id_raises_not_found(store) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        store.delete_note("/work", 999)

    assert excinfo.value.note_id == 999
    assert str(excinfo.value) == "No note with id 999"


def test_delete_from_other_directory_raises_not_found(store) -> None:
    note_id = store.add_note("/d1", "mine")

    with pytest.raises(NotFoundError):
        store.delete_note("/d2", note_id)

    assert store.list_notes("/d1") == {note_id: "mine"}


def test_not_found_is_not_a_storage_error(store) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        store.delete_note("/work", 1)

    assert not isinstance(excinfo.value, StorageError)


def test_ids_are_not_reused_after_delete(store) -> None:
    note_id = store.add_note("/work", "short lived")
    store.delete_note("/work", note_id)

    new_id = store.add_note("/work", "next")

    assert new_id > note_id


def test_delete_id_outside_integer_range_raises_not_found(store) -> None:
    store.add_note("/work", "keep")

    for note_id in (2**63, -(2**63) - 1, 10**30):
        with pytest.raises(NotFoundError):
            store.delete_note("/work", note_id)

    assert list(store.list_notes("/work").values()) == ["keep"]


# =====================================================================
# Undecodable names
# =====================================================================


def test_surrogate_escaped_directory_round_trips(store) -> None:
    raw_dir = b"/tmp/caf\xe9".decode("utf-8", "surrogateescape")
    note_id = store.add_note(raw_dir, "bytes in the name")

    assert store.list_notes(raw_dir) == {note_id: "bytes in the name"}
    assert store.list_notes("/tmp/caf\u00e9") == {}

    store.delete_note(raw_dir, note_id)
    assert store.list_notes(raw_dir) == {}


def test_surrogate_escaped_text_is_stored_readably(store) -> None:
    store.add_note("/work", b"na\xefve".decode("utf-8", "surrogateescape"))

    assert list(store.list_notes("/work").values()) == ["na\\xefve"]


def test_unencodable_text_raises_storage_error(store) -> None:
    with pytest.raises(StorageError, match="Failed to add note"):
        store.add_note("/work", "lone \ud800 surrogate")


def test_encode_text_leaves_valid_text_alone() -> None:
    assert encode_text("/home/caf\u00e9 \u2713") == "/home/caf\u00e9 \u2713"


# =====================================================================
# Lifecycle
# =====================================================================


def test_close_is_idempotent(db_path) -> None:
    store = NoteStore.open(db_path)
    store.close()
    store.close()


def test_operations_after_close_raise_storage_error(db_path) -> None:
    store = NoteStore.open(db_path)
    store.close()

    with pytest.raises(StorageError, match="closed"):
        store.list_notes("/work")


def test_in_memory_store() -> None:
    with NoteStore.open(":memory:") as store:
        note_id = store.add_note("/work", "ephemeral")
        assert store.list_notes("/work") == {note_id: "ephemeral"}
