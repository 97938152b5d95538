"""Selection state for the notes list and detail pane.

The controller owns one thing: which note (if any) is selected, plus the
row offsets waiting on a delete confirmation. The list of notes itself is
owned by the persistence collaborator, which pushes a fresh ordered snapshot
through on_collection_changed after every change.

All comparisons go through the note id. Offsets are only used at the moment
a delete is issued, because they shift as rows disappear.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, FrozenSet, Iterable, Iterator, Optional, Protocol, Tuple
import uuid

from notetaker.models.schemas import NoteItem
from notetaker.utils.logger import get_logger

logger = get_logger(__name__)

DELETE_SELECTED = "selected"
DELETE_OFFSETS = "offsets"


class PersistenceCollaborator(Protocol):
    def insert(self, item: NoteItem) -> None: ...

    def delete(self, item: NoteItem) -> None: ...


@dataclass(frozen=True)
class ConfirmationRequest:
    """A destructive action waiting for the user to say yes or no."""

    kind: str
    title: str
    count: int = 1
    confirm_label: str = "Delete"
    cancel_label: str = "Cancel"


class SelectionController:
    """Keeps a single selected note consistent with the stored collection.

    Args:
        store: Persistence collaborator receiving insert/delete commands.
        clock: Time source for new notes (defaults to datetime.now).
    """

    def __init__(
        self,
        store: PersistenceCollaborator,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._store = store
        self._clock = clock or datetime.now
        self._items: Tuple[NoteItem, ...] = ()
        self._selection: Optional[uuid.UUID] = None
        self._pending_offsets: Optional[FrozenSet[int]] = None
        self._busy = False

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def selection(self) -> Optional[uuid.UUID]:
        return self._selection

    @property
    def items(self) -> Tuple[NoteItem, ...]:
        return self._items

    @property
    def pending_delete_offsets(self) -> Optional[FrozenSet[int]]:
        return self._pending_offsets

    @property
    def selected_item(self) -> Optional[NoteItem]:
        if self._selection is None:
            return None
        return self._find(self._selection)

    @property
    def can_delete_selected(self) -> bool:
        return self.selected_item is not None

    # ------------------------------------------------------------------
    # Collection changes
    # ------------------------------------------------------------------

    def on_collection_changed(self, new_items: Iterable[NoteItem]) -> Optional[uuid.UUID]:
        """Take a new snapshot and make sure the selection still points into it.

        Notifications that arrive while one of our own writes is in flight
        only drop a selection that vanished; the running operation picks the
        final one.
        """
        self._items = tuple(new_items)
        if not self._busy:
            self._reconcile()
        elif self._selection is not None and self._find(self._selection) is None:
            self._selection = None
        return self._selection

    def select(self, item_id: Optional[uuid.UUID]) -> Optional[uuid.UUID]:
        """Select a note picked by the user. Unknown ids are ignored."""
        if item_id is None:
            self._selection = None
        elif self._find(item_id) is not None:
            self._selection = item_id
        else:
            logger.debug("Ignoring selection of unknown note %s", item_id)
        return self._selection

    # ------------------------------------------------------------------
    # Add
    # ------------------------------------------------------------------

    def request_add_item(self) -> Tuple[NoteItem, Optional[uuid.UUID]]:
        item = NoteItem.new(self._clock)
        with self._handling():
            self._store.insert(item)
        self._selection = item.id
        logger.debug("Added note %s and selected it", item.id)
        return item, self._selection

    # ------------------------------------------------------------------
    # Delete the selected note (detail pane)
    # ------------------------------------------------------------------

    def request_delete_selected(self) -> Optional[ConfirmationRequest]:
        if self._selection is None:
            return None
        return ConfirmationRequest(kind=DELETE_SELECTED, title="Delete this note?")

    def confirm_delete_selected(self) -> Optional[uuid.UUID]:
        target = self.selected_item
        if target is None:
            return self._selection
        with self._handling():
            self._store.delete(target)
        self._selection = None
        return self._selection

    # ------------------------------------------------------------------
    # Delete rows by offset (list pane)
    # ------------------------------------------------------------------

    def request_delete_at_offsets(self, offsets: Iterable[int]) -> ConfirmationRequest:
        self._pending_offsets = frozenset(int(o) for o in offsets)
        return ConfirmationRequest(
            kind=DELETE_OFFSETS,
            title="Delete selected note(s)?",
            count=len(self._pending_offsets),
        )

    def confirm_delete_at_offsets(self) -> Optional[uuid.UUID]:
        offsets = self._pending_offsets
        if offsets is None:
            return self._selection
        self._pending_offsets = None

        snapshot = self._items
        targets = []
        for index in sorted(offsets):
            if 0 <= index < len(snapshot):
                targets.append(snapshot[index])
            else:
                logger.warning("Ignoring delete offset %d outside %d notes", index, len(snapshot))

        deleted_ids = {item.id for item in targets}
        deleted_selected = self._selection in deleted_ids

        try:
            with self._handling():
                for item in targets:
                    self._store.delete(item)
        except Exception:
            # Some rows may be gone already.
            self._reconcile()
            raise

        if deleted_selected:
            remaining = [item for item in self._items if item.id not in deleted_ids]
            self._selection = remaining[0].id if remaining else None
        return self._selection

    def cancel_pending_delete(self) -> None:
        self._pending_offsets = None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @contextmanager
    def _handling(self) -> Iterator[None]:
        self._busy = True
        try:
            yield
        finally:
            self._busy = False

    def _find(self, item_id: uuid.UUID) -> Optional[NoteItem]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def _reconcile(self) -> None:
        if self._selection is not None and self._find(self._selection) is not None:
            return
        previous = self._selection
        self._selection = self._items[0].id if self._items else None
        if previous != self._selection:
            logger.debug("Selection moved from %s to %s", previous, self._selection)
