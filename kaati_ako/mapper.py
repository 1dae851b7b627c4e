"""
Record mapper shared by all entities.

Each entity declares its table name, four fixed SQL statements and how to
decode a row. The CRUD algorithms below are written once and driven by those
class constants. Statements use named bind parameters only.
"""
from typing import Any, ClassVar, Dict, List, Mapping, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.engine import Connection

from kaati_ako.database import execute, last_insert_id
from kaati_ako.exceptions import NotFoundError, ValueNotIntegerError, ValueNotStringError
from kaati_ako.logging_config import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound="Model")


def integer_value(value: Any) -> int:
    """Return value if it is an integer column value."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueNotIntegerError()
    return value


def string_value(value: Any) -> str:
    """Return value if it is a text column value."""
    if not isinstance(value, str):
        raise ValueNotStringError()
    return value


class Model(BaseModel):
    """Base class for a database model."""

    TABLE_NAME: ClassVar[str]
    STATEMENT_INSERT: ClassVar[str]
    STATEMENT_SELECT: ClassVar[str]
    STATEMENT_SELECT_ALL: ClassVar[str]
    STATEMENT_UPDATE: ClassVar[str]

    # 0 until the row has been inserted
    id: int = 0

    @classmethod
    def from_empty(cls: Type[M]) -> M:
        """Instantiate an empty object."""
        return cls()

    @classmethod
    def from_row(cls: Type[M], row: Sequence[Any]) -> M:
        """
        Instantiate an object from a database row, checking every column's type.

        Each entity overrides this hook.
        """
        raise NotImplementedError

    def values(self) -> Dict[str, Any]:
        """
        Column values bound on insert and update, without the id.

        Each entity overrides this hook.
        """
        raise NotImplementedError

    @classmethod
    def insert(cls, conn: Connection, values: Mapping[str, Any]) -> int:
        """Insert a row and return the id the database assigned to it."""
        execute(conn, cls.STATEMENT_INSERT, values)
        new_id = last_insert_id(conn, cls.TABLE_NAME)
        logger.debug(f"Inserted {cls.TABLE_NAME} {new_id}")
        return new_id

    @classmethod
    def load(cls: Type[M], conn: Connection, id: int) -> M:
        """Load one object by id, raising NotFoundError if there is none."""
        row = execute(conn, cls.STATEMENT_SELECT, {"id": id}).first()
        if row is None:
            raise NotFoundError(cls.TABLE_NAME, id)
        return cls.from_row(row)

    @classmethod
    def load_all(cls: Type[M], conn: Connection) -> List[M]:
        """Load all objects."""
        rows = execute(conn, cls.STATEMENT_SELECT_ALL).all()
        return [cls.from_row(row) for row in rows]

    @classmethod
    def update(cls, conn: Connection, values: Mapping[str, Any]) -> None:
        """Update the row whose id is given in values."""
        execute(conn, cls.STATEMENT_UPDATE, values)

    @classmethod
    def delete(cls, conn: Connection, id: int) -> None:
        """
        Delete one row by id.

        Rows referencing it are left alone; with foreign keys enforced the
        engine refuses and a StorageError is raised.
        """
        execute(conn, f"DELETE FROM {cls.TABLE_NAME} WHERE id = :id", {"id": id})
        logger.debug(f"Deleted {cls.TABLE_NAME} {id}")

    def save(self, conn: Connection) -> int:
        """Save to the database (insert or update), returning the id."""
        values = self.values()
        if self.id:
            values["id"] = self.id
            self.update(conn, values)
        else:
            self.id = self.insert(conn, values)
        return self.id
