"""Persistent key-value store interface

The controller keeps exactly two slots: the session token and the cached
list of known users. Both are plain strings in the store.
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStoreInterface(ABC):
    """Interface defining string slot operations"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get slot value

        Args:
            key: Slot name

        Returns:
            Stored string or None when the slot is empty
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Replace slot value"""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Empty the slot; emptying an empty slot is a no-op"""
        pass
