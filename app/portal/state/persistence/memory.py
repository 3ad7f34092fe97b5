"""In-process store"""
from typing import Dict, Optional

from portal.state.interface import KeyValueStoreInterface


class MemoryStore(KeyValueStoreInterface):
    """Dict-backed store, lost on exit"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
