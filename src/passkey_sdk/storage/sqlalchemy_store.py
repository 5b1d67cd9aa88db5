from __future__ import annotations

from sqlalchemy import select

from .base import KeyValueStore
from .models import Base, StoredItem
from .sqlalchemy_manager import SQLAlchemyManager


class SQLAlchemyStore(KeyValueStore):
    """Key-value store persisted in the ``local_storage`` table.

    Every call runs in its own short-lived session.
    """

    def __init__(self, database_url: str) -> None:
        self.manager = SQLAlchemyManager(Base.metadata)
        self.manager.initialize(database_url)
        self.manager.create_all_tables()

    def get_item(self, key: str) -> str | None:
        with self.manager.session_scope() as session:
            item = session.get(StoredItem, key)
            return item.value if item else None

    def set_item(self, key: str, value: str) -> None:
        with self.manager.session_scope() as session:
            item = session.get(StoredItem, key)
            if item is None:
                session.add(StoredItem(key=key, value=value))
            else:
                item.value = value

    def remove_item(self, key: str) -> None:
        with self.manager.session_scope() as session:
            item = session.get(StoredItem, key)
            if item is not None:
                session.delete(item)

    def keys(self) -> list[str]:
        with self.manager.session_scope() as session:
            return list(session.scalars(select(StoredItem.key)))

    def close(self) -> None:
        self.manager.close()
