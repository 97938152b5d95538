"""Application state container.

This is a small, import-safe state object used by the GUI layer. Selection
lives in the SelectionController; this only holds what the status bar shows.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class AppState:
    """Holds ephemeral UI state."""

    status_message: str = "Ready"
    item_count: int = 0
    last_error: Optional[str] = None
