from kaati_ako.categories.models import CategoryTable
from kaati_ako.categories.schemas import Category

__all__ = [
    # Models
    "CategoryTable",
    # Schemas
    "Category",
]
