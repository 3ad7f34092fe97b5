import json
import unittest
from unittest.mock import MagicMock

from redis import RedisError

from portal.error.exceptions import SystemException
from portal.state.known_users import KnownUsersCache
from portal.state.persistence import MemoryStore, RedisStore, create_store
from portal.state.token_store import TokenStore


class TestTokenStore(unittest.TestCase):
    def setUp(self):
        self.store = MemoryStore()
        self.tokens = TokenStore(self.store)

    def test_empty_store_is_unauthenticated(self):
        self.assertIsNone(self.tokens.get_token())
        self.assertFalse(self.tokens.is_authenticated())

    def test_save_and_read(self):
        self.tokens.save_token("xyz")
        self.assertEqual(self.tokens.get_token(), "xyz")
        self.assertTrue(self.tokens.is_authenticated())
        self.assertEqual(self.store.get("token"), "xyz")

    def test_later_save_supersedes(self):
        self.tokens.save_token("first")
        self.tokens.save_token("second")
        self.assertEqual(self.tokens.get_token(), "second")

    def test_clear(self):
        self.tokens.save_token("xyz")
        self.tokens.clear_token()
        self.assertFalse(self.tokens.is_authenticated())
        self.tokens.clear_token()

    def test_empty_token_rejected(self):
        with self.assertRaises(ValueError):
            self.tokens.save_token("")


class TestRedisStore(unittest.TestCase):
    def setUp(self):
        self.redis = MagicMock()
        self.store = RedisStore(self.redis, prefix="portal")

    def test_keys_are_namespaced(self):
        self.store.set("token", "xyz")
        self.redis.set.assert_called_once_with("portal:token", "xyz")

        self.store.delete("token")
        self.redis.delete.assert_called_once_with("portal:token")

    def test_get_decodes_bytes(self):
        self.redis.get.return_value = b"xyz"
        self.assertEqual(self.store.get("token"), "xyz")
        self.redis.get.assert_called_once_with("portal:token")

    def test_get_missing(self):
        self.redis.get.return_value = None
        self.assertIsNone(self.store.get("token"))

    def test_redis_errors_become_system_exceptions(self):
        self.redis.get.side_effect = RedisError("down")
        with self.assertRaises(SystemException) as ctx:
            self.store.get("token")
        self.assertEqual(ctx.exception.details["code"], "STORE_READ_ERROR")

    def test_token_store_over_redis(self):
        tokens = TokenStore(self.store)
        self.redis.get.return_value = None
        self.assertFalse(tokens.is_authenticated())


class TestCreateStore(unittest.TestCase):
    def test_memory_without_url(self):
        self.assertIsInstance(create_store(redis_url=""), MemoryStore)

    def test_redis_with_url(self):
        store = create_store(redis_url="redis://localhost:6379/0", prefix="test")
        self.assertIsInstance(store, RedisStore)
        self.assertEqual(store.prefix, "test")


class TestKnownUsersCache(unittest.TestCase):
    def setUp(self):
        self.store = MemoryStore()
        self.cache = KnownUsersCache(self.store)

    def test_empty(self):
        self.assertFalse(self.cache.contains("AB123456"))

    def test_reads_legacy_and_current_keys(self):
        self.store.set("users", json.dumps([
            {"regNo": "OLD12345"},
            {"registrationNumber": "NEW12345"},
        ]))
        self.assertTrue(self.cache.contains("OLD12345"))
        self.assertTrue(self.cache.contains("NEW12345"))
        self.assertFalse(self.cache.contains("XYZ12345"))

    def test_corrupt_cache_is_ignored(self):
        self.store.set("users", "{not json")
        self.assertFalse(self.cache.contains("AB123456"))
        self.store.set("users", json.dumps({"registrationNumber": "AB123456"}))
        self.assertFalse(self.cache.contains("AB123456"))

    def test_remember(self):
        self.cache.remember("AB123456", name="Asha")
        self.cache.remember("AB123456", name="Asha")
        self.assertTrue(self.cache.contains("AB123456"))
        self.assertEqual(
            json.loads(self.store.get("users")),
            [{"registrationNumber": "AB123456", "name": "Asha"}]
        )


if __name__ == "__main__":
    unittest.main()
