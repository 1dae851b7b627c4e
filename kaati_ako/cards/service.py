"""
Card workflows driven by the editor dialogs.

These take values the user entered, never widgets, and persist them through
the entity mappers. Errors propagate to the caller unchanged.
"""
from typing import Optional

from sqlalchemy.engine import Connection

from kaati_ako.cards.schemas import Card, CardDraft, TranslationDraft
from kaati_ako.categories.schemas import Category
from kaati_ako.exceptions import NotFoundError
from kaati_ako.languages.schemas import Language
from kaati_ako.logging_config import get_logger
from kaati_ako.translations.schemas import Translation

logger = get_logger(__name__)


def save_card(conn: Connection, draft: CardDraft, card_id: Optional[int] = None) -> Card:
    """
    Add a new card (card_id None) or edit an existing one.

    Every known language gets a translation: existing ones are updated, missing
    ones inserted, even when their text is empty. Returns the saved card
    loaded with its relations.
    """
    category = Category.load_by_name(conn, draft.category_name)
    card = Card.from_empty() if card_id is None else Card.load(conn, card_id)

    if card.id == 0 or card.category_id != category.id:
        card.category_id = category.id
        card.save(conn)

    for language in Language.load_all(conn):
        entry = draft.translations.get(language.id, TranslationDraft())
        translation = Translation.load_for_card_language(conn, card.id, language.id)
        translation.text = entry.text
        translation.description = entry.description
        translation.save(conn)

    action = "Added" if card_id is None else "Updated"
    logger.info(f"{action} card {card.id} in category '{category.name}'")
    return Card.get(conn, card.id)


def delete_card(conn: Connection, card_id: int) -> Optional[int]:
    """
    Delete a card and its translations.

    Returns the id of a random remaining card to show next, or None when the
    last card is gone.
    """
    card = Card.load(conn, card_id)
    Translation.delete_for_card(conn, card.id)
    Card.delete(conn, card.id)
    logger.info(f"Deleted card {card.id}")
    try:
        return Card.random_id(conn)
    except NotFoundError:
        logger.info("No cards left")
        return None
