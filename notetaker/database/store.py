"""Item store: the persistence collaborator for the selection controller.

Every write is committed in its own short-lived session and followed by a
push of the full, ordered snapshot to all subscribers. Subscribers never
receive ORM rows, only frozen NoteItem values.
"""

from __future__ import annotations

from typing import Callable, List, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from notetaker.models.schemas import NoteItem
from notetaker.utils.logger import get_logger

from . import repository

logger = get_logger(__name__)

Snapshot = Tuple[NoteItem, ...]
Listener = Callable[[Snapshot], object]


class PersistenceError(Exception):
    """Raised when the underlying database rejects a read or write."""
    pass


class ItemStore:
    """SQLAlchemy-backed note store with push notifications."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def refresh(self) -> Snapshot:
        """Re-deliver the current snapshot (start-up, out-of-band changes)."""
        snapshot = self.items()
        self._notify(snapshot)
        return snapshot

    # ------------------------------------------------------------------
    # Reads / writes
    # ------------------------------------------------------------------

    def items(self) -> Snapshot:
        session: Session = self._session_factory()
        try:
            rows = repository.list_items(session)
            return tuple(NoteItem.model_validate(row) for row in rows)
        except SQLAlchemyError as exc:
            logger.error("Failed to load notes: %s", exc)
            raise PersistenceError("Could not load notes") from exc
        finally:
            session.close()

    def insert(self, item: NoteItem) -> None:
        self._write("insert", lambda s: repository.insert_item(s, item))
        logger.info("Inserted note %s", item.id)
        self.refresh()

    def delete(self, item: NoteItem) -> None:
        removed = self._write("delete", lambda s: repository.delete_item(s, item.id))
        if removed:
            logger.info("Deleted note %s", item.id)
        else:
            logger.debug("Note %s already gone, nothing to delete", item.id)
        self.refresh()

    def _write(self, action: str, fn: Callable[[Session], object]):
        session: Session = self._session_factory()
        try:
            return fn(session)
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error("Note %s failed: %s", action, exc)
            raise PersistenceError(f"Could not {action} note") from exc
        finally:
            session.close()

    def _notify(self, snapshot: Snapshot) -> None:
        for listener in list(self._listeners):
            listener(snapshot)
