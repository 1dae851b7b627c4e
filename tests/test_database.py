import pytest
from sqlalchemy import text

from kaati_ako.categories.schemas import Category
from kaati_ako.config import DB_PATH_ENV, DEFAULT_DB_PATH, resolve_db_path
from kaati_ako.database import execute, get_connection, last_insert_id
from kaati_ako.exceptions import (
    DatabaseFileNotFoundError,
    NotFoundError,
    StorageError,
    ValueNotIntegerError,
    ValueNotStringError,
)


def test_get_connection_missing_file(tmp_path, monkeypatch):
    missing = tmp_path / "missing.sqlite"
    monkeypatch.setenv(DB_PATH_ENV, str(missing))

    with pytest.raises(DatabaseFileNotFoundError) as exc_info:
        get_connection()

    assert exc_info.value.path == str(missing)
    assert str(exc_info.value) == f"DatabaseError: File not found: {missing}!"
    assert not missing.exists()


def test_get_connection_uses_environment_override(db_path, monkeypatch):
    monkeypatch.setenv(DB_PATH_ENV, db_path)

    with get_connection() as conn:
        assert conn.execute(text("SELECT COUNT(*) FROM category")).scalar() == 0


def test_get_connection_opens_a_new_connection_per_call(db_path):
    first = get_connection(db_path)
    second = get_connection(db_path)
    try:
        assert first is not second
    finally:
        first.close()
        second.close()


def test_resolve_db_path(monkeypatch):
    assert resolve_db_path() == DEFAULT_DB_PATH

    monkeypatch.setenv(DB_PATH_ENV, "other.sqlite")
    assert resolve_db_path() == "other.sqlite"
    assert resolve_db_path("explicit.sqlite") == "explicit.sqlite"


def test_foreign_keys_are_enforced(conn):
    assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1


def test_last_insert_id(conn):
    first = Category.insert(conn, {"name": "first"})
    second = Category.insert(conn, {"name": "second"})

    assert second > first
    assert last_insert_id(conn, "category") == second


def test_last_insert_id_empty_table(conn):
    assert last_insert_id(conn, "card") == 0


def test_execute_wraps_engine_errors(conn):
    with pytest.raises(StorageError) as exc_info:
        execute(conn, "SELECT id FROM no_such_table")

    assert "no such table" in exc_info.value.engine_message
    assert str(exc_info.value).startswith("DatabaseError: SQLite error: ")


def test_error_messages():
    assert str(ValueNotIntegerError()) == "DatabaseError: Value not an integer!"
    assert str(ValueNotStringError()) == "DatabaseError: Value not a string!"
    assert str(NotFoundError()) == "DatabaseError: Not found!"
    assert str(NotFoundError("card", 7)) == "DatabaseError: Not found: card 7!"


def test_get_connection_path_with_question_mark(tmp_path):
    path = tmp_path / "deck?old.sqlite"
    path.touch()

    with get_connection(str(path)) as conn:
        conn.execute(text("CREATE TABLE marker (id INTEGER PRIMARY KEY)"))

    assert sorted(p.name for p in tmp_path.iterdir()) == ["deck?old.sqlite"]
    assert path.stat().st_size > 0


def test_get_connection_on_directory_is_a_storage_error(tmp_path):
    with pytest.raises(StorageError) as exc_info:
        get_connection(str(tmp_path))

    assert "unable to open database file" in exc_info.value.engine_message


def test_get_connection_empty_override_is_a_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(DB_PATH_ENV, "")

    with pytest.raises(DatabaseFileNotFoundError) as exc_info:
        get_connection()

    assert exc_info.value.path == ""
    assert list(tmp_path.iterdir()) == []
