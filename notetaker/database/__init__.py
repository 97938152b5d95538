"""Database models, engine helpers and the item store."""
from .engine import get_engine, init_db
from .models import ItemRecord, Base
from .repository import insert_item, delete_item, get_item, list_items
from .store import ItemStore, PersistenceError

__all__ = [
    "get_engine",
    "init_db",
    "ItemRecord",
    "Base",
    "insert_item",
    "delete_item",
    "get_item",
    "list_items",
    "ItemStore",
    "PersistenceError",
]
