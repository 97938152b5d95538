from .items_service import open_store

__all__ = ["open_store"]
