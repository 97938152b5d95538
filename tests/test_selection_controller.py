"""Tests for the selection-consistency state machine."""

from datetime import datetime
from unittest.mock import Mock
import uuid

import pytest

from notetaker.models.schemas import NoteItem
from notetaker.selection import (
    DELETE_OFFSETS,
    DELETE_SELECTED,
    ConfirmationRequest,
    SelectionController,
)


def make_item(second: int) -> NoteItem:
    return NoteItem(id=uuid.uuid4(), timestamp=datetime(2026, 1, 1, 9, 0, second))


class FakeStore:
    """In-memory collaborator that pushes snapshots like ItemStore does."""

    def __init__(self, items=()):
        self.rows = list(items)
        self.inserted = []
        self.deleted = []
        self.listeners = []

    def subscribe(self, listener):
        self.listeners.append(listener)

    def insert(self, item):
        self.rows.append(item)
        self.inserted.append(item)
        self._notify()

    def delete(self, item):
        self.rows = [row for row in self.rows if row.id != item.id]
        self.deleted.append(item)
        self._notify()

    def _notify(self):
        for listener in self.listeners:
            listener(tuple(self.rows))


FIXED_NOW = datetime(2026, 10, 19, 15, 4, 0)


def build(items=()):
    store = FakeStore(items)
    controller = SelectionController(store, clock=lambda: FIXED_NOW)
    store.subscribe(controller.on_collection_changed)
    controller.on_collection_changed(tuple(store.rows))
    return store, controller


# ===========================================================================
# Collection changes
# ===========================================================================


def test_starts_with_empty_selection():
    controller = SelectionController(FakeStore())
    assert controller.selection is None
    assert controller.pending_delete_offsets is None
    assert controller.selected_item is None
    assert controller.items == ()


def test_collection_change_picks_first_when_nothing_selected():
    i1, i2 = make_item(1), make_item(2)
    _, controller = build([i1, i2])
    assert controller.selection == i1.id
    assert controller.selected_item == i1


def test_collection_change_keeps_present_selection():
    i1, i2, i3 = make_item(1), make_item(2), make_item(3)
    _, controller = build([i1, i2])
    controller.select(i2.id)

    assert controller.on_collection_changed([i1, i2, i3]) == i2.id
    assert controller.on_collection_changed([i3, i2]) == i2.id


def test_collection_change_moves_to_first_when_selection_vanishes():
    i1, i2, i3 = make_item(1), make_item(2), make_item(3)
    _, controller = build([i1, i2, i3])
    controller.select(i2.id)

    assert controller.on_collection_changed([i3, i1]) == i3.id


def test_collection_change_to_empty_clears_selection():
    i1 = make_item(1)
    _, controller = build([i1])
    assert controller.on_collection_changed([]) is None
    assert controller.selected_item is None


def test_collection_change_is_idempotent():
    i1, i2 = make_item(1), make_item(2)
    _, controller = build([i1, i2])
    controller.select(i2.id)
    snapshot = [i1]

    once = controller.on_collection_changed(snapshot)
    twice = controller.on_collection_changed(snapshot)
    assert once == twice == i1.id


# ===========================================================================
# Add
# ===========================================================================


def test_add_into_empty_collection_selects_new_item():
    store, controller = build()
    item, selection = controller.request_add_item()

    assert store.rows == [item]
    assert controller.items == (item,)
    assert selection == item.id == controller.selection
    assert item.timestamp == FIXED_NOW


def test_add_overrides_existing_selection():
    i1, i2 = make_item(1), make_item(2)
    store, controller = build([i1, i2])
    controller.select(i2.id)

    item, selection = controller.request_add_item()
    assert selection == item.id
    assert store.inserted == [item]


def test_add_emits_exactly_one_insert_without_notifications():
    store = Mock()
    controller = SelectionController(store)

    item, selection = controller.request_add_item()
    store.insert.assert_called_once_with(item)
    store.delete.assert_not_called()
    assert selection == item.id


def test_add_failure_leaves_selection_alone():
    i1 = make_item(1)
    store, controller = build([i1])
    store.insert = Mock(side_effect=RuntimeError("disk full"))

    with pytest.raises(RuntimeError):
        controller.request_add_item()
    assert controller.selection == i1.id


def test_new_items_get_unique_ids():
    _, controller = build()
    first, _ = controller.request_add_item()
    second, _ = controller.request_add_item()
    assert first.id != second.id
    assert controller.selection == second.id


# ===========================================================================
# Delete selected
# ===========================================================================


def test_request_delete_selected_without_selection_is_noop():
    store, controller = build()
    assert controller.request_delete_selected() is None
    assert controller.can_delete_selected is False
    assert store.deleted == []


def test_request_delete_selected_raises_confirmation_only():
    i1 = make_item(1)
    store, controller = build([i1])

    request = controller.request_delete_selected()
    assert isinstance(request, ConfirmationRequest)
    assert request.kind == DELETE_SELECTED
    assert request.title == "Delete this note?"
    assert store.deleted == []
    assert controller.selection == i1.id


def test_delete_selected_single_item():
    i1 = make_item(1)
    store, controller = build([i1])

    controller.request_delete_selected()
    assert controller.confirm_delete_selected() is None
    assert store.rows == []
    assert controller.selection is None


def test_delete_selected_clears_instead_of_picking_next():
    i1, i2 = make_item(1), make_item(2)
    store, controller = build([i1, i2])

    assert controller.confirm_delete_selected() is None
    assert store.deleted == [i1]
    assert controller.items == (i2,)

    # The next out-of-band change picks the first item again.
    assert controller.on_collection_changed(store.rows) == i2.id


def test_confirm_delete_selected_without_selection_is_noop():
    store, controller = build()
    assert controller.confirm_delete_selected() is None
    assert store.deleted == []


# ===========================================================================
# Delete at offsets
# ===========================================================================


def test_request_delete_at_offsets_stores_pending():
    i1, i2 = make_item(1), make_item(2)
    store, controller = build([i1, i2])

    request = controller.request_delete_at_offsets([1, 0, 1])
    assert request.kind == DELETE_OFFSETS
    assert request.title == "Delete selected note(s)?"
    assert request.count == 2
    assert controller.pending_delete_offsets == frozenset({0, 1})
    assert store.deleted == []


def test_delete_selected_row_moves_selection_to_next_remaining():
    i1, i2 = make_item(1), make_item(2)
    store, controller = build([i1, i2])
    assert controller.selection == i1.id

    controller.request_delete_at_offsets({0})
    assert controller.confirm_delete_at_offsets() == i2.id
    assert store.rows == [i2]
    assert controller.pending_delete_offsets is None


def test_delete_unselected_row_keeps_selection():
    i1, i2 = make_item(1), make_item(2)
    store, controller = build([i1, i2])
    controller.select(i2.id)

    controller.request_delete_at_offsets({0})
    assert controller.confirm_delete_at_offsets() == i2.id
    assert store.rows == [i2]


def test_delete_compares_by_id_not_shifted_index():
    i1, i2, i3 = make_item(1), make_item(2), make_item(3)
    store, controller = build([i1, i2, i3])
    controller.select(i3.id)

    controller.request_delete_at_offsets({0, 1})
    assert controller.confirm_delete_at_offsets() == i3.id
    assert store.deleted == [i1, i2]


def test_delete_multiple_rows_including_selection():
    i1, i2, i3, i4 = make_item(1), make_item(2), make_item(3), make_item(4)
    store, controller = build([i1, i2, i3, i4])
    controller.select(i2.id)

    controller.request_delete_at_offsets({2, 0, 1})
    assert controller.confirm_delete_at_offsets() == i4.id
    assert store.rows == [i4]


def test_delete_all_rows_clears_selection():
    i1, i2 = make_item(1), make_item(2)
    store, controller = build([i1, i2])

    controller.request_delete_at_offsets({0, 1})
    assert controller.confirm_delete_at_offsets() is None
    assert store.rows == []
    assert controller.selected_item is None


def test_confirm_without_pending_offsets_is_noop():
    i1 = make_item(1)
    store, controller = build([i1])
    assert controller.confirm_delete_at_offsets() == i1.id
    assert store.deleted == []


def test_cancel_clears_pending_without_deleting():
    i1, i2 = make_item(1), make_item(2)
    store, controller = build([i1, i2])

    controller.request_delete_at_offsets({0})
    controller.cancel_pending_delete()
    assert controller.pending_delete_offsets is None
    assert controller.confirm_delete_at_offsets() == i1.id
    assert store.deleted == []


def test_out_of_range_offsets_are_ignored():
    i1, i2 = make_item(1), make_item(2)
    store, controller = build([i1, i2])

    controller.request_delete_at_offsets({1, 5, -1})
    assert controller.confirm_delete_at_offsets() == i1.id
    assert store.deleted == [i2]


def test_failed_delete_leaves_valid_selection():
    i1, i2, i3 = make_item(1), make_item(2), make_item(3)
    store, controller = build([i1, i2, i3])
    real_delete = store.delete
    calls = []

    def flaky_delete(item):
        calls.append(item)
        if len(calls) == 2:
            raise RuntimeError("locked")
        real_delete(item)

    store.delete = flaky_delete
    controller.request_delete_at_offsets({0, 1})
    with pytest.raises(RuntimeError):
        controller.confirm_delete_at_offsets()

    assert store.rows == [i2, i3]
    assert controller.selection == i2.id
    assert controller.pending_delete_offsets is None


# ===========================================================================
# User selection
# ===========================================================================


def test_select_known_unknown_and_none():
    i1, i2 = make_item(1), make_item(2)
    _, controller = build([i1, i2])

    assert controller.select(i2.id) == i2.id
    assert controller.select(uuid.uuid4()) == i2.id
    assert controller.select(None) is None
    assert controller.can_delete_selected is False


# ===========================================================================
# Notifications during the controller's own writes
# ===========================================================================


def watch_selection(store, controller):
    """Subscribe after the controller and record whether each notification
    left the selection pointing into the current snapshot."""
    seen = []

    def check(_snapshot):
        selection = controller.selection
        seen.append(selection is None or selection in {item.id for item in controller.items})

    store.subscribe(check)
    return seen


def test_selection_never_dangles_while_deleting_selected():
    i1, i2 = make_item(1), make_item(2)
    store, controller = build([i1, i2])
    seen = watch_selection(store, controller)

    controller.confirm_delete_selected()
    assert seen == [True]
    assert controller.selection is None


def test_selection_never_dangles_while_deleting_rows():
    i1, i2, i3 = make_item(1), make_item(2), make_item(3)
    store, controller = build([i1, i2, i3])
    seen = watch_selection(store, controller)

    controller.request_delete_at_offsets({0, 1})
    assert controller.confirm_delete_at_offsets() == i3.id
    assert seen == [True, True]


def test_selection_kept_during_unrelated_row_delete():
    i1, i2 = make_item(1), make_item(2)
    store, controller = build([i1, i2])
    controller.select(i2.id)
    selections = []
    store.subscribe(lambda _snapshot: selections.append(controller.selection))

    controller.request_delete_at_offsets({0})
    controller.confirm_delete_at_offsets()
    assert selections == [i2.id]


def test_offsets_resolve_against_latest_snapshot():
    i0, i1, i2 = make_item(0), make_item(1), make_item(2)
    store, controller = build([i1, i2])
    assert controller.selection == i1.id

    controller.request_delete_at_offsets({0})
    # A note appears out of band before the user confirms.
    store.rows.insert(0, i0)
    store._notify()
    assert controller.selection == i1.id

    assert controller.confirm_delete_at_offsets() == i1.id
    assert store.deleted == [i0]
    assert store.rows == [i1, i2]
