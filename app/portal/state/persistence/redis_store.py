"""Redis-backed store"""
import logging
from typing import Optional

from redis import Redis, RedisError

from portal.error.exceptions import SystemException
from portal.state.interface import KeyValueStoreInterface

logger = logging.getLogger(__name__)


class RedisStore(KeyValueStoreInterface):
    """Slots as namespaced Redis strings without expiry"""

    def __init__(self, redis_client: Redis, prefix: str = "portal"):
        self.redis = redis_client
        self.prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self.prefix}:{key}" if self.prefix else key

    def get(self, key: str) -> Optional[str]:
        try:
            value = self.redis.get(self._key(key))
        except RedisError as e:
            logger.error(f"Redis get failed for {key}: {e}")
            raise SystemException(
                message=f"Failed to read {key}: {e}",
                code="STORE_READ_ERROR",
                service="redis_store",
                action="get"
            ) from e
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        try:
            self.redis.set(self._key(key), value)
        except RedisError as e:
            logger.error(f"Redis set failed for {key}: {e}")
            raise SystemException(
                message=f"Failed to write {key}: {e}",
                code="STORE_WRITE_ERROR",
                service="redis_store",
                action="set"
            ) from e

    def delete(self, key: str) -> None:
        try:
            self.redis.delete(self._key(key))
        except RedisError as e:
            logger.error(f"Redis delete failed for {key}: {e}")
            raise SystemException(
                message=f"Failed to delete {key}: {e}",
                code="STORE_DELETE_ERROR",
                service="redis_store",
                action="delete"
            ) from e
