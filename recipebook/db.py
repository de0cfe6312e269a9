"""Database access: a thin handle around a SQLAlchemy engine.

Handlers never import an engine; the application creates one ``Database``
at startup, keeps it on ``app.state`` and hands it out through ``get_db``.
"""
from typing import Any, Dict, List, Optional

import structlog
from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from .models import Base

logger = structlog.get_logger(__name__)

Params = Optional[Dict[str, Any]]


class Database:
    def __init__(self, engine: Engine):
        self.engine = engine

    def query(self, sql: str, params: Params = None) -> List[Dict[str, Any]]:
        """Run a read statement and return every row as a dict."""
        with self.engine.connect() as conn:
            result = conn.execute(text(sql), params or {})
            return [dict(row) for row in result.mappings()]

    def query_one(self, sql: str, params: Params = None) -> Optional[Dict[str, Any]]:
        """Run a read statement and return the first row, or None."""
        with self.engine.connect() as conn:
            row = conn.execute(text(sql), params or {}).mappings().first()
            return dict(row) if row is not None else None

    def execute(self, sql: str, params: Params = None) -> int:
        """Run a write statement in its own transaction; return rows affected."""
        with self.engine.begin() as conn:
            return conn.execute(text(sql), params or {}).rowcount

    def insert(self, sql: str, params: Params = None) -> Optional[int]:
        """Run an ``INSERT ... RETURNING id`` in its own transaction; return the id."""
        with self.engine.begin() as conn:
            return conn.execute(text(sql), params or {}).scalar()

    def init_schema(self):
        Base.metadata.create_all(bind=self.engine)

    def dispose(self):
        self.engine.dispose()


def create_database(url: str, echo: bool = False) -> Database:
    kwargs: Dict[str, Any] = {"echo": echo}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # in-memory databases live per connection, so share one
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
    engine = create_engine(url, **kwargs)
    logger.debug("database_engine_created", url=str(engine.url))
    return Database(engine)


def get_db(request: Request) -> Database:
    return request.app.state.db
