"""
Notetaker - a single-view list of timestamped notes.

Core (non-GUI) pieces live here: configuration, persistence and the
selection controller that keeps the list and detail panes in sync.
"""

__version__ = "1.0.0"

from .selection import ConfirmationRequest, SelectionController

__all__ = [
    "ConfirmationRequest",
    "SelectionController",
]
