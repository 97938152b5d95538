from datetime import datetime
import uuid

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class ItemRecord(Base):
    """A stored note.

    Only the identity and creation time are persisted; both are fixed for
    the lifetime of the row.
    """

    __tablename__ = "items"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    timestamp = Column(DateTime, nullable=False, default=datetime.now)

    def __repr__(self) -> str:  # pragma: no cover - repr utility
        return f"ItemRecord(id={self.id}, timestamp={self.timestamp})"
