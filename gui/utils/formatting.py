"""Display strings shared by the list and detail panes."""

from __future__ import annotations

from datetime import datetime

from notetaker.selection import DELETE_SELECTED, ConfirmationRequest


def format_timestamp(ts: datetime) -> str:
    """Numeric date with a short 12-hour time, e.g. ``10/19/2026, 3:04 PM``."""
    hour = ts.hour % 12 or 12
    meridiem = "AM" if ts.hour < 12 else "PM"
    return f"{ts.month}/{ts.day}/{ts.year}, {hour}:{ts.minute:02d} {meridiem}"


def detail_text(ts: datetime) -> str:
    return f"Item at {format_timestamp(ts)}"


def confirmation_message(request: ConfirmationRequest) -> str:
    if request.kind == DELETE_SELECTED or request.count == 1:
        return "This note will be permanently deleted."
    return f"These {request.count} notes will be permanently deleted."
