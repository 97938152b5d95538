"""Pydantic schemas for notes leaving the persistence layer.

A NoteItem is an immutable snapshot of a stored row. The GUI and the
selection controller only ever see these, never live ORM objects.
"""
import uuid
from datetime import datetime
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict


class NoteItem(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: uuid.UUID
    timestamp: datetime

    @classmethod
    def new(cls, clock: Optional[Callable[[], datetime]] = None) -> "NoteItem":
        """Build a note with a fresh id stamped with the current time."""
        now = (clock or datetime.now)()
        return cls(id=uuid.uuid4(), timestamp=now)
