from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String

from salestrack.database.base import Base
from salestrack.database.types import UTCDateTime


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String(150), nullable=False, unique=True)
    email = Column(String(254), nullable=False, unique=True)

    password_hash = Column(String(128), nullable=False)
    password_salt = Column(String(64), nullable=False)

    created_at = Column(
        UTCDateTime,
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


__all__ = ["User"]
