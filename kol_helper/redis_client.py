# -*- coding: utf-8 -*-
import logging

import redis

from kol_helper import settings
from kol_helper.logging_service import LogType, format_and_log
from kol_helper.redis_wrapper import RedisWrapper

# 全局变量，用于存储 Redis 包装器实例
db: RedisWrapper | None = None

def initialize_redis(redis_config: dict = None) -> RedisWrapper:
    """
    初始化一个全局共享的、带健壮性包装的 Redis 客户端。
    """
    global db
    redis_config = redis_config if redis_config is not None else settings.REDIS_CONFIG

    if not redis_config.get('enabled'):
        format_and_log(LogType.SYSTEM, "数据库连接", {'类型': 'Redis', '状态': '已禁用'})
        db = RedisWrapper(None) # 即使禁用，也创建一个空的包装器
        return db

    try:
        pool = redis.ConnectionPool(
            host=redis_config.get('host', 'localhost'),
            port=redis_config.get('port', 6379),
            password=redis_config.get('password'),
            db=redis_config.get('db', 0),
            decode_responses=True,  # 自动解码，无需手动 .decode()
            socket_connect_timeout=5,
            health_check_interval=30
        )
        real_client = redis.Redis(connection_pool=pool)

        # 验证连接
        real_client.ping()
        format_and_log(LogType.SYSTEM, "数据库连接", {'类型': 'Redis', '状态': '连接成功'})

        db = RedisWrapper(real_client)
        return db

    except redis.exceptions.RedisError as e:
        format_and_log(LogType.SYSTEM, "数据库连接", {
            '类型': 'Redis',
            '状态': '连接失败',
            '错误': str(e),
        }, level=logging.CRITICAL)
        # 即使连接失败，也创建一个空的包装器，防止程序在调用 db 时直接崩溃
        db = RedisWrapper(None)
        return db
