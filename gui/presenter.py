"""Glue between the item store, the selection controller and the views.

The presenter never imports Tkinter. Dialogs are injected as callables so
the whole add/select/delete flow can be driven from tests.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional
import uuid

from gui.state import AppState
from gui.utils.logging import log
from notetaker.database.store import ItemStore, PersistenceError
from notetaker.selection import ConfirmationRequest, SelectionController

ConfirmFn = Callable[[ConfirmationRequest], bool]
ErrorFn = Callable[[str, str], Any]


class NotesPresenter:
    """Turns user gestures into controller calls and re-renders afterwards.

    Args:
        store: The item store; the presenter subscribes the controller to it.
        controller: Optional pre-built controller (defaults to one over `store`).
        confirm: Asked before any delete; returning False cancels it.
        on_error: Receives (title, message) when the store fails.
        state: Status bar state.
    """

    def __init__(
        self,
        store: ItemStore,
        controller: Optional[SelectionController] = None,
        confirm: Optional[ConfirmFn] = None,
        on_error: Optional[ErrorFn] = None,
        state: Optional[AppState] = None,
    ):
        self.store = store
        self.controller = controller or SelectionController(store)
        self.state = state or AppState()
        self._confirm = confirm or (lambda request: False)
        self._on_error = on_error
        self._render_listeners: List[Callable[[], Any]] = []
        self._unsubscribe = store.subscribe(self._on_store_changed)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Load the stored notes and select the first one."""
        if self._guard("Load failed", self.store.refresh):
            self._set_status("Ready")

    def close(self) -> None:
        self._unsubscribe()

    def on_render(self, listener: Callable[[], Any]) -> None:
        self._render_listeners.append(listener)

    # ------------------------------------------------------------------
    # Gestures
    # ------------------------------------------------------------------

    def add_item(self) -> Optional[uuid.UUID]:
        if self._guard("Add failed", self.controller.request_add_item):
            self._set_status("Added note")
        return self.controller.selection

    def select(self, item_id: Optional[uuid.UUID]) -> Optional[uuid.UUID]:
        if item_id == self.controller.selection:
            return item_id
        selection = self.controller.select(item_id)
        self._render()
        return selection

    def delete_selected(self) -> bool:
        """Ask, then delete the note shown in the detail pane."""
        request = self.controller.request_delete_selected()
        if request is None:
            return False
        if not self._confirm(request):
            log("Delete of selected note cancelled", "DEBUG")
            return False
        if not self._guard("Delete failed", self.controller.confirm_delete_selected):
            return False
        self._set_status("Deleted note")
        return True

    def delete_at_offsets(self, offsets: Iterable[int]) -> bool:
        """Ask, then delete the list rows at `offsets`."""
        offsets = list(offsets)
        if not offsets:
            return False
        request = self.controller.request_delete_at_offsets(offsets)
        if not self._confirm(request):
            self.controller.cancel_pending_delete()
            log("Delete of %d row(s) cancelled" % len(offsets), "DEBUG")
            return False
        if not self._guard("Delete failed", self.controller.confirm_delete_at_offsets):
            return False
        self._set_status("Deleted %d note(s)" % request.count)
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _on_store_changed(self, snapshot) -> None:
        self.controller.on_collection_changed(snapshot)
        self.state.item_count = len(snapshot)
        self._render()

    def _guard(self, title: str, fn: Callable[[], Any]) -> bool:
        try:
            fn()
            return True
        except PersistenceError as exc:
            message = str(exc)
            if exc.__cause__ is not None:
                message = f"{message}: {exc.__cause__}"
            log(f"{title}: {message}", "ERROR")
            self.state.last_error = message
            self._set_status(title)
            if self._on_error is not None:
                self._on_error(title, message)
            return False

    def _set_status(self, message: str) -> None:
        self.state.status_message = message
        self._render()

    def _render(self) -> None:
        for listener in list(self._render_listeners):
            listener()
