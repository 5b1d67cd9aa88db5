from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """String key-value store with the surface of browser local storage."""

    @abstractmethod
    def get_item(self, key: str) -> str | None: ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None: ...

    @abstractmethod
    def remove_item(self, key: str) -> None: ...

    @abstractmethod
    def keys(self) -> list[str]: ...

    def close(self) -> None:
        """Release resources held by the store."""
