import json
from pathlib import Path

import structlog

from . import crud, schemas
from .db import Database

logger = structlog.get_logger(__name__)


def load_recipes(path):
    """Load recipes from a JSON file and return a list of dicts.

    Args:
        path (str or Path): Path to the JSON file.

    Returns:
        list: list of recipe dictionaries, empty when the file is missing.
    """
    p = Path(path)
    if not p.exists():
        return []
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)


def import_recipes(db: Database, recipes) -> int:
    """Insert recipes whose title is not stored yet; return how many were added."""
    added = 0
    for r in recipes:
        title = r.get("title")
        if not title:
            continue
        exists = db.query_one("SELECT id FROM recipes WHERE title = :title", {"title": title})
        if exists:
            continue
        crud.create_recipe(
            db,
            schemas.RecipeCreate(
                title=title,
                ingredients=r.get("ingredients"),
                method=r.get("method"),
            ),
        )
        added += 1
    logger.info("recipes_imported", added=added)
    return added
