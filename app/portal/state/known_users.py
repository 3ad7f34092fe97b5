"""Client-side cache of known registration numbers

The cache backs a best-effort duplicate check before signup. The backend
remains the authority on uniqueness.
"""
import json
import logging
from typing import Any, Dict, List

from portal.config.constants import USERS_KEY

from .interface import KeyValueStoreInterface

logger = logging.getLogger(__name__)


class KnownUsersCache:
    """JSON list of user records stored in one slot"""

    def __init__(self, store: KeyValueStoreInterface, key: str = USERS_KEY):
        self._store = store
        self._key = key

    def _load(self) -> List[Dict[str, Any]]:
        raw = self._store.get(self._key)
        if not raw:
            return []
        try:
            users = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Known users cache is not valid JSON, ignoring it")
            return []
        if not isinstance(users, list):
            logger.warning("Known users cache is not a list, ignoring it")
            return []
        return [user for user in users if isinstance(user, dict)]

    @staticmethod
    def _registration_number(user: Dict[str, Any]) -> Any:
        # Older records carry the number as regNo
        return user.get("registrationNumber", user.get("regNo"))

    def contains(self, registration_number: str) -> bool:
        return any(
            self._registration_number(user) == registration_number
            for user in self._load()
        )

    def remember(self, registration_number: str, **details: Any) -> None:
        """Record a registration number; repeated numbers are not duplicated"""
        users = self._load()
        if any(self._registration_number(user) == registration_number for user in users):
            return
        users.append({"registrationNumber": registration_number, **details})
        self._store.set(self._key, json.dumps(users))
