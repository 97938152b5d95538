"""Thin repository helpers for stored notes.

These functions provide a small abstraction over SQLAlchemy sessions. They
commit their own writes; callers own the session lifetime.
"""
from typing import List, Optional
import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from notetaker.models.schemas import NoteItem

from .models import ItemRecord


def insert_item(session: Session, payload: NoteItem) -> ItemRecord:
    """Persist a new note row and return it."""
    record = ItemRecord(id=str(payload.id), timestamp=payload.timestamp)
    session.add(record)
    session.commit()
    session.refresh(record)
    return record


def delete_item(session: Session, item_id: uuid.UUID) -> bool:
    """Delete a note by id. Returns False if it was already gone."""
    record = session.get(ItemRecord, str(item_id))
    if record is None:
        return False
    session.delete(record)
    session.commit()
    return True


def get_item(session: Session, item_id: uuid.UUID) -> Optional[ItemRecord]:
    return session.get(ItemRecord, str(item_id))


def list_items(session: Session) -> List[ItemRecord]:
    """Return all notes in display order (oldest first, ties by id)."""
    q = select(ItemRecord).order_by(ItemRecord.timestamp, ItemRecord.id)
    return list(session.execute(q).scalars().all())
