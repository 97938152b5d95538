"""Store construction for the GUI.

Keeps database wiring out of the views: the app asks for a store and gets
one whose tables already exist.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import sessionmaker

from notetaker.database.engine import get_engine, init_db
from notetaker.database.store import ItemStore
from gui.utils.logging import log


def open_store(database_url: Optional[str] = None) -> ItemStore:
    """Return an ItemStore on `database_url` (default: configured database)."""
    engine = get_engine(database_url)
    init_db(engine)
    log(f"Using notes database {engine.url.render_as_string(hide_password=True)}")
    return ItemStore(sessionmaker(bind=engine, autoflush=False, autocommit=False))
