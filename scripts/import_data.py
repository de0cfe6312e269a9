from pathlib import Path

from recipebook.config import get_settings
from recipebook.db import create_database
from recipebook.recipes import import_recipes, load_recipes


def main(path=None):
    p = Path(path) if path else Path(__file__).resolve().parents[1] / "data" / "recipes.json"
    if not p.exists():
        print(f"{p} not found")
        return
    db = create_database(get_settings().database_url)
    try:
        db.init_schema()
        added = import_recipes(db, load_recipes(p))
    finally:
        db.dispose()
    print(f'Imported {added} recipes')


if __name__ == '__main__':
    main()
