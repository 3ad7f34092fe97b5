"""Session token store

A single slot holds the token. A later save supersedes the previous token;
there is no expiry and no refresh. Token presence alone means authenticated.
"""
import logging
from typing import Optional

from portal.config.constants import TOKEN_KEY

from .interface import KeyValueStoreInterface

logger = logging.getLogger(__name__)


class TokenStore:
    """Owns the session token slot"""

    def __init__(self, store: KeyValueStoreInterface, key: str = TOKEN_KEY):
        self._store = store
        self._key = key

    def save_token(self, token: str) -> None:
        if not token:
            raise ValueError("Token cannot be empty")
        self._store.set(self._key, token)
        logger.debug("Session token stored")

    def get_token(self) -> Optional[str]:
        return self._store.get(self._key)

    def clear_token(self) -> None:
        self._store.delete(self._key)
        logger.debug("Session token cleared")

    def is_authenticated(self) -> bool:
        return self.get_token() is not None
