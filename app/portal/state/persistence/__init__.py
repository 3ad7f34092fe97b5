"""Key-value store backends"""
import logging

from redis import Redis

from portal.config.constants import KEY_PREFIX, REDIS_URL

from .memory import MemoryStore
from .redis_store import RedisStore

logger = logging.getLogger(__name__)


def create_store(redis_url: str = REDIS_URL, prefix: str = KEY_PREFIX):
    """Build the configured store: Redis when a URL is set, else memory"""
    if redis_url:
        logger.info("Using Redis key-value store")
        client = Redis.from_url(redis_url, decode_responses=True)
        return RedisStore(client, prefix=prefix)

    logger.info("REDIS_URL not set, using in-process store")
    return MemoryStore()


__all__ = ['MemoryStore', 'RedisStore', 'create_store']
