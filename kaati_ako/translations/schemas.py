from typing import Any, ClassVar, Dict, List, Optional, Sequence

from sqlalchemy.engine import Connection

from kaati_ako.database import execute
from kaati_ako.languages.schemas import Language
from kaati_ako.logging_config import get_logger
from kaati_ako.mapper import Model, integer_value, string_value

logger = get_logger(__name__)


class Translation(Model):
    """A flash card's text in one language."""

    TABLE_NAME: ClassVar[str] = "translation"
    STATEMENT_INSERT: ClassVar[str] = (
        "INSERT INTO translation (card_id, language_id, text, description) "
        "VALUES (:card_id, :language_id, :text, :description)"
    )
    STATEMENT_SELECT: ClassVar[str] = (
        "SELECT id, card_id, language_id, text, description FROM translation WHERE id = :id"
    )
    STATEMENT_SELECT_ALL: ClassVar[str] = (
        "SELECT id, card_id, language_id, text, description FROM translation ORDER BY id"
    )
    STATEMENT_UPDATE: ClassVar[str] = (
        "UPDATE translation SET card_id = :card_id, language_id = :language_id, "
        "text = :text, description = :description WHERE id = :id"
    )
    STATEMENT_SELECT_FOR_CARD: ClassVar[str] = (
        "SELECT id, card_id, language_id, text, description FROM translation "
        "WHERE card_id = :card_id ORDER BY language_id, id"
    )
    STATEMENT_SELECT_FOR_CARD_LANGUAGE: ClassVar[str] = (
        "SELECT id, card_id, language_id, text, description FROM translation "
        "WHERE card_id = :card_id AND language_id = :language_id ORDER BY id LIMIT 1"
    )
    STATEMENT_DELETE_FOR_CARD: ClassVar[str] = "DELETE FROM translation WHERE card_id = :card_id"

    card_id: int = 0
    language_id: int = 0
    text: str = ""
    # An optional description with examples or further explanations
    description: str = ""

    # Resolved from language_id by load_language(), never written back
    language: Optional[Language] = None

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Translation":
        return cls(
            id=integer_value(row[0]),
            card_id=integer_value(row[1]),
            language_id=integer_value(row[2]),
            text=string_value(row[3]),
            description=string_value(row[4]),
        )

    def values(self) -> Dict[str, Any]:
        return {
            "card_id": self.card_id,
            "language_id": self.language_id,
            "text": self.text,
            "description": self.description,
        }

    @classmethod
    def load_for_card(cls, conn: Connection, card_id: int) -> List["Translation"]:
        """Load all translations of a card, ordered by language."""
        rows = execute(conn, cls.STATEMENT_SELECT_FOR_CARD, {"card_id": card_id}).all()
        return [cls.from_row(row) for row in rows]

    @classmethod
    def load_for_card_language(
            cls,
            conn: Connection,
            card_id: int,
            language_id: int) -> "Translation":
        """
        Load the translation of a card in one language.

        Unlike load(), a missing row is not an error: an unsaved, blank
        translation for that card and language is returned instead, ready to
        be filled in and saved.
        """
        row = execute(
            conn,
            cls.STATEMENT_SELECT_FOR_CARD_LANGUAGE,
            {"card_id": card_id, "language_id": language_id},
        ).first()
        if row is None:
            return cls(card_id=card_id, language_id=language_id)
        return cls.from_row(row)

    @classmethod
    def delete_for_card(cls, conn: Connection, card_id: int) -> int:
        """Delete all translations of a card, returning how many were removed."""
        result = execute(conn, cls.STATEMENT_DELETE_FOR_CARD, {"card_id": card_id})
        logger.debug(f"Deleted {result.rowcount} translations of card {card_id}")
        return result.rowcount

    def load_language(self, conn: Connection) -> Language:
        """Resolve and attach the Language this translation is made in."""
        self.language = Language.load(conn, self.language_id)
        return self.language
