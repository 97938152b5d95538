"""Data schemas and validation."""
from .schemas import NoteItem

__all__ = [
    "NoteItem",
]
