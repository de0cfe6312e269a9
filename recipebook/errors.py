import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = structlog.get_logger(__name__)


class RecipeNotFound(Exception):
    def __init__(self, recipe_id):
        super().__init__(f"Recipe {recipe_id} not found")
        self.recipe_id = recipe_id


async def recipe_not_found_handler(request: Request, exc: RecipeNotFound):
    logger.warning("recipe_not_found", recipe_id=exc.recipe_id, path=request.url.path)
    return JSONResponse(status_code=404, content={"error": "Recipe not found"})


async def server_error_handler(request: Request, exc: Exception):
    logger.error(
        "unhandled_exception",
        exception=repr(exc),
        path=request.url.path,
        method=request.method,
    )
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(RecipeNotFound, recipe_not_found_handler)
    app.add_exception_handler(SQLAlchemyError, server_error_handler)
    app.add_exception_handler(Exception, server_error_handler)
