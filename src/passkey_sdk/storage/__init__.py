"""Key-value storage backends for the credential registry."""

from .base import KeyValueStore
from .memory import MemoryStore
from .sqlalchemy_manager import SQLAlchemyManager
from .sqlalchemy_store import SQLAlchemyStore


def open_store(url: str) -> KeyValueStore:
    """Open a store from a URL: ``memory`` or any SQLAlchemy database URL."""
    if url == "memory":
        return MemoryStore()
    return SQLAlchemyStore(url)


__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "SQLAlchemyManager",
    "SQLAlchemyStore",
    "open_store",
]
