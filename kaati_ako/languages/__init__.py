from kaati_ako.languages.models import LanguageTable
from kaati_ako.languages.schemas import Language

__all__ = [
    # Models
    "LanguageTable",
    # Schemas
    "Language",
]
