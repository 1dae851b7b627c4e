"""Errors raised while accessing the database."""
from typing import Any, Optional

PREFIX = "DatabaseError"


class DatabaseError(Exception):
    """Base exception for everything the data layer raises."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"{PREFIX}: {self.message}!"


class DatabaseFileNotFoundError(DatabaseError):
    """Raised when there is no database file at the resolved path."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: {path}")


class NotFoundError(DatabaseError):
    """Raised when a query expected a row and got none."""

    def __init__(self, table: Optional[str] = None, key: Any = None):
        self.table = table
        self.key = key
        message = "Not found"
        if table is not None:
            message = f"Not found: {table} {key!r}" if key is not None else f"Not found: {table}"
        super().__init__(message)


class ValueNotIntegerError(DatabaseError):
    """Raised when a column expected to hold an integer holds something else."""

    def __init__(self):
        super().__init__("Value not an integer")


class ValueNotStringError(DatabaseError):
    """Raised when a column expected to hold a string holds something else."""

    def __init__(self):
        super().__init__("Value not a string")


class StorageError(DatabaseError):
    """Wraps an error reported by the storage engine, message kept verbatim."""

    def __init__(self, message: str):
        self.engine_message = message
        super().__init__(f"SQLite error: {message}")
