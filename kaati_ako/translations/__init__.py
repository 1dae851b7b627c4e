from kaati_ako.translations.models import TranslationTable
from kaati_ako.translations.schemas import Translation

__all__ = [
    # Models
    "TranslationTable",
    # Schemas
    "Translation",
]
