# flake8: noqa
import sys
import json
from pathlib import Path

# Ensure project root is on sys.path so `scripts` and `recipebook` can be imported when tests are run
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

from recipebook.config import Settings
from recipebook.db import create_database
from scripts import import_data


def test_missing_data_file_opens_no_database(tmp_path, monkeypatch, capsys):
    opened = []
    monkeypatch.setattr(import_data, "create_database", lambda url: opened.append(url))

    import_data.main(tmp_path / "missing.json")

    assert opened == []
    assert "not found" in capsys.readouterr().out


def test_imports_into_configured_database_and_disposes(tmp_path, monkeypatch, capsys):
    data = tmp_path / "recipes.json"
    data.write_text(json.dumps([{"title": "Flapjack", "ingredients": "oats", "method": "bake"}]), encoding="utf-8")
    url = f"sqlite:///{tmp_path / 'seed.db'}"
    monkeypatch.setattr(import_data, "get_settings", lambda: Settings(_env_file=None, database_url=url))

    disposed = []

    def tracking_create_database(db_url):
        db = create_database(db_url)
        original = db.dispose
        db.dispose = lambda: (disposed.append(db_url), original())
        return db

    monkeypatch.setattr(import_data, "create_database", tracking_create_database)

    import_data.main(data)

    assert disposed == [url]
    assert "Imported 1 recipes" in capsys.readouterr().out
    db = create_database(url)
    try:
        assert [r["title"] for r in db.query("SELECT title FROM recipes")] == ["Flapjack"]
    finally:
        db.dispose()
