from typing import Any, ClassVar, Dict, List, Optional, Sequence

from pydantic import BaseModel, Field
from sqlalchemy.engine import Connection

from kaati_ako.categories.schemas import Category
from kaati_ako.database import execute
from kaati_ako.exceptions import NotFoundError
from kaati_ako.logging_config import get_logger
from kaati_ako.mapper import Model, integer_value
from kaati_ako.translations.schemas import Translation

logger = get_logger(__name__)


# ========== Card ==========

class Card(Model):
    """A flash card: a category plus one translation per language."""

    TABLE_NAME: ClassVar[str] = "card"
    STATEMENT_INSERT: ClassVar[str] = "INSERT INTO card (category_id) VALUES (:category_id)"
    STATEMENT_SELECT: ClassVar[str] = "SELECT id, category_id FROM card WHERE id = :id"
    STATEMENT_SELECT_ALL: ClassVar[str] = "SELECT id, category_id FROM card ORDER BY id"
    STATEMENT_UPDATE: ClassVar[str] = "UPDATE card SET category_id = :category_id WHERE id = :id"
    STATEMENT_RANDOM_ID: ClassVar[str] = "SELECT id FROM card ORDER BY RANDOM() LIMIT 1"

    category_id: int = 0

    # Joined data, filled in by load_relations()
    category: Optional[Category] = None
    translations: List[Translation] = []

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Card":
        return cls(id=integer_value(row[0]), category_id=integer_value(row[1]))

    def values(self) -> Dict[str, Any]:
        return {"category_id": self.category_id}

    @classmethod
    def random_id(cls, conn: Connection) -> int:
        """Get the id of a random card."""
        row = execute(conn, cls.STATEMENT_RANDOM_ID).first()
        if row is None:
            raise NotFoundError(cls.TABLE_NAME)
        return integer_value(row[0])

    @classmethod
    def get(cls, conn: Connection, card_id: Optional[int] = None) -> "Card":
        """
        Load a card together with its category and translations.

        card_id None picks a random card. This is unrelated to id 0, which
        only ever marks a card that has not been saved yet.
        """
        if card_id is None:
            card_id = cls.random_id(conn)
        card = cls.load(conn, card_id)
        card.load_relations(conn)
        return card

    def load_relations(self, conn: Connection) -> "Card":
        """Attach category, translations and each translation's language."""
        self.category = Category.load(conn, self.category_id)
        self.translations = Translation.load_for_card(conn, self.id)
        for translation in self.translations:
            translation.load_language(conn)
        logger.debug(f"Loaded card {self.id} with {len(self.translations)} translations")
        return self


# ========== Card drafts ==========

class TranslationDraft(BaseModel):
    """User-entered text of a card in one language."""
    text: str = ""
    description: str = ""


class CardDraft(BaseModel):
    """User-entered values for adding or editing a card."""
    category_name: str = Field(..., description="Name of the card's category")
    # language id -> text and description; missing languages are saved blank
    translations: Dict[int, TranslationDraft] = {}
