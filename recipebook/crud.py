import structlog

from . import schemas
from .db import Database

logger = structlog.get_logger(__name__)


def get_recipes(db: Database):
    return db.query("SELECT * FROM recipes")


def get_recipe(db: Database, recipe_id: int):
    return db.query_one("SELECT * FROM recipes WHERE id = :id", {"id": recipe_id})


def create_recipe(db: Database, recipe: schemas.RecipeCreate):
    recipe_id = db.insert(
        "INSERT INTO recipes (title, ingredients, method) "
        "VALUES (:title, :ingredients, :method) RETURNING id",
        recipe.model_dump(include={"title", "ingredients", "method"}),
    )
    logger.info("recipe_created", recipe_id=recipe_id)
    return recipe_id


def update_recipe(db: Database, recipe_id: int, recipe: schemas.RecipeCreate):
    params = recipe.model_dump(include={"title", "ingredients", "method"})
    params["id"] = recipe_id
    changed = db.execute(
        "UPDATE recipes SET title = :title, ingredients = :ingredients, "
        "method = :method WHERE id = :id",
        params,
    )
    logger.info("recipe_updated", recipe_id=recipe_id, rows=changed)
    return changed


def delete_recipe(db: Database, recipe_id: int):
    changed = db.execute("DELETE FROM recipes WHERE id = :id", {"id": recipe_id})
    logger.info("recipe_deleted", recipe_id=recipe_id, rows=changed)
    return changed > 0
