from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import ValidationError

from . import crud, schemas
from .db import Database, get_db
from .errors import RecipeNotFound
from .views import ViewRenderer, get_renderer

router = APIRouter()


def parse_recipe_id(raw: str) -> Optional[int]:
    """Return the numeric id, or None when ``raw`` cannot match any row."""
    try:
        return int(raw)
    except ValueError:
        return None


async def recipe_form(request: Request) -> schemas.RecipeCreate:
    # HTML forms post urlencoded/multipart bodies; API clients may send JSON
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError as exc:
            raise RequestValidationError(
                [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error", "input": {}}]
            ) from exc
        if not isinstance(payload, dict):
            payload = {}
    else:
        payload = await request.form()
    fields = {k: payload.get(k) for k in ("title", "ingredients", "method")}
    try:
        return schemas.RecipeCreate(**fields)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc


@router.get("/")
def home(request: Request, renderer: ViewRenderer = Depends(get_renderer)):
    return renderer.render(request, "home", {"title": request.app.state.settings.app_title})


@router.get("/recipes")
def list_recipes(
    request: Request,
    db: Database = Depends(get_db),
    renderer: ViewRenderer = Depends(get_renderer),
):
    recipes = crud.get_recipes(db)
    return renderer.render(request, "recipes", {"recipes": recipes})


@router.get("/recipes/{recipe_id}")
def view_recipe(
    request: Request,
    recipe_id: str,
    db: Database = Depends(get_db),
    renderer: ViewRenderer = Depends(get_renderer),
):
    # an unknown id still renders the page, with recipe set to None
    rid = parse_recipe_id(recipe_id)
    recipe = crud.get_recipe(db, rid) if rid is not None else None
    return renderer.render(request, "recipe", {"recipe": recipe})


@router.post("/recipes")
def create_recipe(
    recipe: schemas.RecipeCreate = Depends(recipe_form),
    db: Database = Depends(get_db),
):
    crud.create_recipe(db, recipe)
    return RedirectResponse(url="/recipes", status_code=302)


@router.post("/recipes/{recipe_id}/edit")
def edit_recipe(
    recipe_id: str,
    recipe: schemas.RecipeCreate = Depends(recipe_form),
    db: Database = Depends(get_db),
):
    rid = parse_recipe_id(recipe_id)
    if rid is not None:
        crud.update_recipe(db, rid, recipe)
    return RedirectResponse(url=f"/recipes/{recipe_id}", status_code=302)


@router.delete("/recipes/{recipe_id}")
def delete_recipe(recipe_id: str, db: Database = Depends(get_db)):
    rid = parse_recipe_id(recipe_id)
    if rid is None or not crud.delete_recipe(db, rid):
        raise RecipeNotFound(recipe_id)
    return JSONResponse(status_code=200, content={"message": "Recipe deleted successfully"})
