from typing import Iterator

from sqlalchemy.orm import Session, sessionmaker

from salestrack.database.engine import engine

# Sales are returned to the caller after commit; keep their attributes loaded.
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_db() -> Iterator[Session]:
    """One session per request, closed once the response is sent."""
    with SessionLocal() as db:
        yield db
