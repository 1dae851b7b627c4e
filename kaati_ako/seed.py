"""
Bootstrap script to create the database with fixture data.

This drops and recreates all tables, then inserts the default category, the
three languages and a few sample cards. There is no migration: running it
again wipes the existing data.

    python -m kaati_ako.seed [path/to/db.sqlite]
"""

import sys
from typing import List, Optional

from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from kaati_ako.cards.models import CardTable  # noqa: F401 (registers table)
from kaati_ako.cards.schemas import Card
from kaati_ako.categories.models import CategoryTable  # noqa: F401
from kaati_ako.categories.schemas import Category
from kaati_ako.config import resolve_db_path
from kaati_ako.database import create_db_engine, metadata, storage_error
from kaati_ako.exceptions import DatabaseError, DatabaseFileNotFoundError
from kaati_ako.languages.models import LanguageTable  # noqa: F401
from kaati_ako.languages.schemas import Language
from kaati_ako.logging_config import get_logger, setup_logging
from kaati_ako.translations.models import TranslationTable  # noqa: F401
from kaati_ako.translations.schemas import Translation

logger = get_logger(__name__)


# ========== SEED DATA ==========

CATEGORIES_DATA = ["default"]

LANGUAGES_DATA = [
    {"code": "to", "name": "Tongan"},
    {"code": "en", "name": "English"},
    {"code": "de", "name": "German"},
]

# Each card: language code -> (text, description)
CARDS_DATA = [
    {
        "category": "default",
        "translations": {
            "to": ("kaati", ""),
            "en": ("card", "A card as in flash card or birthday card"),
            "de": ("Karte", "Eine Karte wie in Karteikarte oder Geburtstagskarte"),
        },
    },
    {
        "category": "default",
        "translations": {
            "to": ("ako", ""),
            "en": ("learn", "Learn a language"),
            "de": ("lernen", "Eine Sprache lernen"),
        },
    },
    {
        "category": "default",
        "translations": {
            "to": ("lea faka", ""),
            "en": ("language", "Learn a language"),
            "de": ("Sprache", "Eine Sprache lernen"),
        },
    },
]


def create_schema(conn: Connection) -> None:
    """Drop and recreate all tables."""
    try:
        metadata.drop_all(conn)
        metadata.create_all(conn)
    except SQLAlchemyError as err:
        raise storage_error(err) from err
    logger.info(f"Created tables: {', '.join(metadata.tables)}")


def insert_fixtures(conn: Connection) -> None:
    """Insert the default category, the languages and the sample cards."""
    categories = {}
    for name in CATEGORIES_DATA:
        category = Category(name=name)
        category.save(conn)
        categories[name] = category

    languages = {}
    for language_data in LANGUAGES_DATA:
        language = Language(**language_data)
        language.save(conn)
        languages[language.code] = language

    total_translations = 0
    for card_data in CARDS_DATA:
        card = Card(category_id=categories[card_data["category"]].id)
        card.save(conn)
        for code, (text, description) in card_data["translations"].items():
            Translation(
                card_id=card.id,
                language_id=languages[code].id,
                text=text,
                description=description,
            ).save(conn)
            total_translations += 1

    logger.info(
        f"Inserted {len(categories)} categories, {len(languages)} languages, "
        f"{len(CARDS_DATA)} cards, {total_translations} translations"
    )


def create_database(conn: Connection) -> None:
    """Create a new database from scratch, including some fixture data."""
    create_schema(conn)
    insert_fixtures(conn)


def bootstrap(db_path: Optional[str] = None) -> str:
    """Create (or recreate) the database file and return its path."""
    path = resolve_db_path(db_path)
    if not path:
        raise DatabaseFileNotFoundError(path)
    logger.info(f"Initializing database at {path}")
    try:
        conn = create_db_engine(path).connect()
    except SQLAlchemyError as err:
        raise storage_error(err) from err
    with conn:
        create_database(conn)
    logger.info("Database initialized successfully!")
    return path


def main(argv: Optional[List[str]] = None) -> int:
    """Command line entry point."""
    if argv is None:
        argv = sys.argv[1:]
    setup_logging()
    db_path = argv[0] if argv else None
    try:
        bootstrap(db_path)
    except DatabaseError as err:
        logger.error(str(err))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
