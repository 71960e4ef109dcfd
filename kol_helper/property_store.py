# -*- coding: utf-8 -*-
from abc import ABC, abstractmethod

from kol_helper import settings
from kol_helper.constants import BASE_KEY
from kol_helper.logging_service import LogType, format_and_log


class PropertyStore(ABC):
    """
    宿主持久化属性的键值存储接口。值一律以字符串保存，类型转换由
    `kol_helper.properties` 负责。
    """

    @abstractmethod
    def get_value(self, key: str, default=None):
        pass

    @abstractmethod
    def save_value(self, key: str, value):
        pass

    @abstractmethod
    def delete_value(self, key: str):
        pass

    @abstractmethod
    def get_all(self) -> dict:
        pass


class MemoryPropertyStore(PropertyStore):
    def __init__(self, initial: dict = None):
        self._data = {}
        for key, value in (initial or {}).items():
            self.save_value(key, value)

    def get_value(self, key: str, default=None):
        return self._data.get(key, default)

    def save_value(self, key: str, value):
        self._data[key] = str(value)

    def delete_value(self, key: str):
        self._data.pop(key, None)

    def get_all(self) -> dict:
        return dict(self._data)


class RedisPropertyStore(PropertyStore):
    """
    以 Redis Hash 保存属性，每个账户一个 Hash。
    Redis 未连接时读取返回默认值，写入直接忽略。
    """
    def __init__(self, db=None, account_id: str = None):
        self.db = db
        self.base_key = BASE_KEY
        self.account_id = account_id
        if self.db and self.db.is_connected:
            format_and_log(LogType.SYSTEM, "组件初始化", {'组件': 'RedisPropertyStore', '状态': '依赖注入完成'})
        else:
            format_and_log(LogType.SYSTEM, "组件初始化", {'组件': 'RedisPropertyStore', '状态': '已禁用 (Redis未连接)'})

    def _get_key(self) -> str:
        """获取指定账户或当前账户的 Redis Key"""
        acc_id = self.account_id or settings.ACCOUNT_ID
        if not acc_id:
            return f"{self.base_key}:uninitialized"
        return f"{self.base_key}:{acc_id}"

    @property
    def _available(self) -> bool:
        # 连接状态由 RedisWrapper 负责降级与恢复，这里每次都经由它调用
        return self.db is not None

    def get_value(self, key: str, default=None):
        if not self._available: return default
        value = self.db.hget(self._get_key(), key)
        return default if value is None else value

    def save_value(self, key: str, value):
        if not self._available: return
        self.db.hset(self._get_key(), key, str(value))

    def delete_value(self, key: str):
        if not self._available: return
        self.db.hdel(self._get_key(), key)

    def get_all(self) -> dict:
        if not self._available: return {}
        data = self.db.hgetall(self._get_key())
        return data if data else {}
