from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .db import Database, create_database
from .errors import register_error_handlers
from .log import configure_logging
from .routes import router
from .views import ViewRenderer

logger = structlog.get_logger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the application.

    A ``database`` passed in is owned by the caller and left open at
    shutdown; otherwise one is created from ``settings.database_url``.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = database is None
        db = create_database(settings.database_url, echo=settings.echo_sql) if owned else database
        db.init_schema()
        app.state.db = db
        logger.info("startup_complete", database=str(db.engine.url))
        yield
        if owned:
            db.dispose()
        logger.info("shutdown_complete")

    app = FastAPI(title=settings.app_title, lifespan=lifespan)
    app.state.settings = settings
    app.state.renderer = ViewRenderer(settings.templates_dir)

    # Allow CORS for API clients (adjust origins for production)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(router)
    return app
