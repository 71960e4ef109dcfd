import logging

import redis

from kol_helper import settings
from kol_helper.property_store import MemoryPropertyStore, RedisPropertyStore
from kol_helper.redis_wrapper import RedisWrapper


class FakeRedis:
    """只实现属性存储用到的 hash 命令。"""
    def __init__(self):
        self.hashes = {}
        self.fail = False

    def _check(self):
        if self.fail:
            raise redis.exceptions.ConnectionError("connection refused")

    def hget(self, key, field):
        self._check()
        return self.hashes.get(key, {}).get(field)

    def hset(self, key, field, value):
        self._check()
        self.hashes.setdefault(key, {})[field] = value
        return 1

    def hdel(self, key, field):
        self._check()
        return 1 if self.hashes.get(key, {}).pop(field, None) is not None else 0

    def hgetall(self, key):
        self._check()
        return dict(self.hashes.get(key, {}))


def test_memory_store():
    store = MemoryPropertyStore({"_banderRunaways": 2})
    assert store.get_value("_banderRunaways") == "2"
    assert store.get_value("missing", "x") == "x"

    store.delete_value("_banderRunaways")
    assert store.get_all() == {}


def test_redis_store_uses_account_hash():
    fake = FakeRedis()
    store = RedisPropertyStore(RedisWrapper(fake), account_id="12345")

    store.save_value("_sourceTerminalEnhanceUses", 1)
    assert fake.hashes == {"kol_helper:properties:12345": {"_sourceTerminalEnhanceUses": "1"}}
    assert store.get_value("_sourceTerminalEnhanceUses") == "1"
    assert store.get_all() == {"_sourceTerminalEnhanceUses": "1"}

    store.delete_value("_sourceTerminalEnhanceUses")
    assert store.get_value("_sourceTerminalEnhanceUses", "0") == "0"


def test_redis_store_without_connection():
    store = RedisPropertyStore(RedisWrapper(None), account_id="12345")

    store.save_value("_banderRunaways", 1)
    assert store.get_value("_banderRunaways", 0) == 0
    assert store.get_all() == {}


def test_wrapper_degrades_on_connection_error(caplog):
    fake = FakeRedis()
    wrapper = RedisWrapper(fake)
    fake.fail = True

    with caplog.at_level(logging.CRITICAL, logger="kol_helper"):
        assert wrapper.hget("k", "f") is None
        assert wrapper.hset("k", "f", "v") == 0

    assert not wrapper.is_connected
    assert "数据库连接中断" in caplog.text

    fake.fail = False
    assert wrapper.hset("k", "f", "v") == 1
    assert wrapper.is_connected
    assert wrapper.hget("k", "f") == "v"


def test_redis_store_recovers_after_connection_error():
    fake = FakeRedis()
    fake.hashes["kol_helper:properties:12345"] = {"_banderRunaways": "7"}
    store = RedisPropertyStore(RedisWrapper(fake), account_id="12345")

    # Test case 1: Connection drops, reads fall back to the default
    fake.fail = True
    assert store.get_value("_banderRunaways") is None
    assert store.get_value("_banderRunaways", "0") == "0"
    assert not store.db.is_connected

    # Test case 2: Connection comes back, the next read sees the stored value
    fake.fail = False
    assert store.get_value("_banderRunaways") == "7"
    assert store.db.is_connected

    store.save_value("_banderRunaways", 8)
    assert fake.hashes["kol_helper:properties:12345"] == {"_banderRunaways": "8"}


def test_redis_store_follows_configured_account(monkeypatch):
    fake = FakeRedis()
    store = RedisPropertyStore(RedisWrapper(fake))

    monkeypatch.setattr(settings, "ACCOUNT_ID", None)
    settings.set_account_id("67890")
    store.save_value("_sourceTerminalPortscanUses", 2)

    assert settings.ACCOUNT_ID == "67890"
    assert fake.hashes == {"kol_helper:properties:67890": {"_sourceTerminalPortscanUses": "2"}}
