# -*- coding: utf-8 -*-
from typing import Optional

from pydantic import BaseModel, conint


# --- 内嵌子模型 ---

class RedisModel(BaseModel):
    enabled: bool = False
    host: str = "localhost"
    port: int = 6379
    password: Optional[str] = None
    db: int = 0

class LogRotationModel(BaseModel):
    max_bytes: conint(gt=0) = 5 * 1024 * 1024
    backup_count: conint(ge=0) = 3

class LoggingSwitchesModel(BaseModel):
    system_activity: bool = True
    cmd_sent: bool = True
    debug_log: bool = False


# --- 顶层配置模型 ---

class ConfigModel(BaseModel):
    account_id: Optional[str] = None
    timezone: str = "UTC"

    redis: RedisModel = RedisModel()
    log_rotation: LogRotationModel = LogRotationModel()
    logging_switches: LoggingSwitchesModel = LoggingSwitchesModel()
