"""Application configuration read from the environment."""
import os
from typing import Optional

# Environment variable naming the database file
DB_PATH_ENV = "DB_PATH"
DEFAULT_DB_PATH = "kaati_ako.sqlite"

LOG_LEVEL = os.getenv("KAATI_AKO_LOG_LEVEL", "INFO")
SQL_ECHO = os.getenv("KAATI_AKO_SQL_ECHO", "").lower() in ("1", "true", "yes", "on")


def resolve_db_path(db_path: Optional[str] = None) -> str:
    """Return the explicit path, else the environment override, else the default."""
    if db_path is not None:
        return str(db_path)
    # An empty override is kept and later reported as a missing file
    return os.getenv(DB_PATH_ENV, DEFAULT_DB_PATH)
