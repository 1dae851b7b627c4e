import pytest

from kaati_ako.config import DB_PATH_ENV
from kaati_ako.database import create_db_engine, get_connection
from kaati_ako.seed import bootstrap, create_schema


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    monkeypatch.delenv(DB_PATH_ENV, raising=False)


@pytest.fixture
def db_path(tmp_path):
    """An existing database file with empty tables."""
    path = str(tmp_path / "empty.sqlite")
    with create_db_engine(path).connect() as conn:
        create_schema(conn)
    return path


@pytest.fixture
def conn(db_path):
    connection = get_connection(db_path)
    yield connection
    connection.close()


@pytest.fixture
def seeded_path(tmp_path):
    """A database file holding the fixture data."""
    return bootstrap(str(tmp_path / "seeded.sqlite"))


@pytest.fixture
def seeded_conn(seeded_path):
    connection = get_connection(seeded_path)
    yield connection
    connection.close()
