import logging
import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url
from sqlalchemy.pool import StaticPool

from salestrack.config import get_settings
from salestrack.database.base import Base

logger = logging.getLogger(__name__)

SQLITE_BUSY_TIMEOUT_SECONDS = 30


def _is_memory_sqlite(url: URL) -> bool:
    return url.database in (None, "", ":memory:") or url.query.get("mode") == "memory"


def build_engine(database_url: str):
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(database_url, pool_pre_ping=True)

    in_memory = _is_memory_sqlite(url)
    options = {}
    if in_memory:
        # Every session must see the same in-memory database.
        options["poolclass"] = StaticPool
    sqlite_engine = create_engine(
        database_url,
        connect_args={"check_same_thread": False, "timeout": SQLITE_BUSY_TIMEOUT_SECONDS},
        pool_pre_ping=True,
        **options,
    )

    @event.listens_for(sqlite_engine, "connect")
    def _on_connect(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.execute("PRAGMA busy_timeout={}".format(SQLITE_BUSY_TIMEOUT_SECONDS * 1000))
            if not in_memory:
                try:
                    cursor.execute("PRAGMA journal_mode=WAL")
                    cursor.execute("PRAGMA synchronous=NORMAL")
                except sqlite3.DatabaseError:
                    logger.warning("SQLite WAL mode unavailable for %s", url.database)
        finally:
            cursor.close()

    return sqlite_engine


engine = build_engine(get_settings().DATABASE_URL)


def init_db(bind=None) -> None:
    from salestrack.models import import_all_models

    import_all_models()
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database schema ready")
