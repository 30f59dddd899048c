from salestrack.database.base import Base
from salestrack.database.engine import engine, init_db
from salestrack.database.session import SessionLocal, get_db

__all__ = ["Base", "SessionLocal", "engine", "get_db", "init_db"]
