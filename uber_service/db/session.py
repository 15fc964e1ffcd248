from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from uber_service.config import Settings


class Database:
    """Database handle built at startup.

    Nothing on the request path touches it; it only holds the engine so the
    connection pool is released on shutdown.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def describe(self) -> str:
        return self.engine.url.render_as_string(hide_password=True)

    def close(self) -> None:
        self.engine.dispose()


def create_database(settings: Settings) -> Database:
    # Engine creation validates the URL and loads the dialect; no connection is made.
    return Database(create_engine(settings.database_url, pool_pre_ping=True))
