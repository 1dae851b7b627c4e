from kaati_ako.cards.models import CardTable
from kaati_ako.cards.schemas import Card, CardDraft, TranslationDraft

__all__ = [
    # Models
    "CardTable",
    # Schemas
    "Card",
    "CardDraft",
    "TranslationDraft",
]
