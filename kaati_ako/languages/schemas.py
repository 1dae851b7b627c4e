from typing import Any, ClassVar, Dict, Sequence

from sqlalchemy.engine import Connection

from kaati_ako.database import execute
from kaati_ako.exceptions import NotFoundError
from kaati_ako.mapper import Model, integer_value, string_value


class Language(Model):
    """
    The language of a flash card translation.

    The code is a two-letter code such as "en". Languages are plain rows,
    seeded once at bootstrap.
    """

    TABLE_NAME: ClassVar[str] = "language"
    STATEMENT_INSERT: ClassVar[str] = "INSERT INTO language (code, name) VALUES (:code, :name)"
    STATEMENT_SELECT: ClassVar[str] = "SELECT id, code, name FROM language WHERE id = :id"
    STATEMENT_SELECT_ALL: ClassVar[str] = "SELECT id, code, name FROM language ORDER BY id"
    STATEMENT_UPDATE: ClassVar[str] = (
        "UPDATE language SET code = :code, name = :name WHERE id = :id"
    )
    STATEMENT_SELECT_BY_CODE: ClassVar[str] = (
        "SELECT id, code, name FROM language WHERE code = :code ORDER BY id LIMIT 1"
    )

    code: str = ""
    name: str = ""

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Language":
        return cls(
            id=integer_value(row[0]),
            code=string_value(row[1]),
            name=string_value(row[2]),
        )

    def values(self) -> Dict[str, Any]:
        return {"code": self.code, "name": self.name}

    @classmethod
    def load_by_code(cls, conn: Connection, code: str) -> "Language":
        """Load the language with the given code."""
        row = execute(conn, cls.STATEMENT_SELECT_BY_CODE, {"code": code}).first()
        if row is None:
            raise NotFoundError(cls.TABLE_NAME, code)
        return cls.from_row(row)
