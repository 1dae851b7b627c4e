from pathlib import Path

from kaati_ako.cards.schemas import Card
from kaati_ako.categories.schemas import Category
from kaati_ako.config import DB_PATH_ENV
from kaati_ako.database import get_connection
from kaati_ako.languages.schemas import Language
from kaati_ako.seed import bootstrap, main
from kaati_ako.translations.schemas import Translation


def test_bootstrap_inserts_fixtures(seeded_path):
    with get_connection(seeded_path) as conn:
        assert [c.name for c in Category.load_all(conn)] == ["default"]
        assert [(l.code, l.name) for l in Language.load_all(conn)] == [
            ("to", "Tongan"),
            ("en", "English"),
            ("de", "German"),
        ]
        assert [c.id for c in Card.load_all(conn)] == [1, 2, 3]
        assert len(Translation.load_all(conn)) == 9


def test_bootstrap_recreates_tables(seeded_path):
    with get_connection(seeded_path) as conn:
        Category(name="extra").save(conn)

    bootstrap(seeded_path)

    with get_connection(seeded_path) as conn:
        assert [c.name for c in Category.load_all(conn)] == ["default"]


def test_bootstrap_uses_environment_override(tmp_path, monkeypatch):
    path = tmp_path / "from_env.sqlite"
    monkeypatch.setenv(DB_PATH_ENV, str(path))

    assert bootstrap() == str(path)
    assert path.exists()


def test_main(tmp_path):
    path = tmp_path / "cli.sqlite"

    assert main([str(path)]) == 0

    assert Path(path).exists()
    with get_connection(str(path)) as conn:
        assert len(Card.load_all(conn)) == 3


def test_main_reports_storage_errors(tmp_path):
    path = tmp_path / "no_such_dir" / "cli.sqlite"

    assert main([str(path)]) == 1


def test_bootstrap_path_with_question_mark(tmp_path):
    path = tmp_path / "cards?v=1.sqlite"

    assert bootstrap(str(path)) == str(path)

    assert sorted(p.name for p in tmp_path.iterdir()) == ["cards?v=1.sqlite"]
    with get_connection(str(path)) as conn:
        assert len(Card.load_all(conn)) == 3


def test_bootstrap_empty_override_creates_nothing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(DB_PATH_ENV, "")

    assert main([]) == 1
    assert list(tmp_path.iterdir()) == []
