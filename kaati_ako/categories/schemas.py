from typing import Any, ClassVar, Dict, Sequence

from sqlalchemy.engine import Connection

from kaati_ako.database import execute
from kaati_ako.exceptions import NotFoundError
from kaati_ako.mapper import Model, integer_value, string_value


class Category(Model):
    """A flash card category."""

    TABLE_NAME: ClassVar[str] = "category"
    STATEMENT_INSERT: ClassVar[str] = "INSERT INTO category (name) VALUES (:name)"
    STATEMENT_SELECT: ClassVar[str] = "SELECT id, name FROM category WHERE id = :id"
    STATEMENT_SELECT_ALL: ClassVar[str] = "SELECT id, name FROM category ORDER BY name, id"
    STATEMENT_UPDATE: ClassVar[str] = "UPDATE category SET name = :name WHERE id = :id"
    STATEMENT_SELECT_BY_NAME: ClassVar[str] = (
        "SELECT id, name FROM category WHERE name = :name ORDER BY id LIMIT 1"
    )

    name: str = ""

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Category":
        return cls(id=integer_value(row[0]), name=string_value(row[1]))

    def values(self) -> Dict[str, Any]:
        return {"name": self.name}

    @classmethod
    def load_by_name(cls, conn: Connection, name: str) -> "Category":
        """Load the category with exactly this name (case-sensitive)."""
        row = execute(conn, cls.STATEMENT_SELECT_BY_NAME, {"name": name}).first()
        if row is None:
            raise NotFoundError(cls.TABLE_NAME, name)
        return cls.from_row(row)
