# -*- coding: utf-8 -*-
import os
import sys

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from kol_helper.config_validator import ConfigModel

# Load environment variables from .env file
load_dotenv()

CONFIG_FILE_PATH = os.getenv('KOL_HELPER_CONFIG', 'config/prod.yaml')
LOG_DIR = 'logs'
LOG_FILE = f'{LOG_DIR}/app.log'
ERROR_LOG_FILE = f'{LOG_DIR}/error.log'


def _load_yaml(path: str) -> dict:
    """
    读取 YAML 配置文件。文件不存在时使用模型默认值，
    作为库被其他脚本导入时不强制要求配置文件。
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        print(f"严重错误: 加载配置文件 {path} 时出错: {e}。程序无法启动。")
        sys.exit(1)


def _validate(raw: dict) -> ConfigModel:
    try:
        return ConfigModel(**raw)
    except ValidationError as e:
        error_message = f"严重错误: 您的 `{CONFIG_FILE_PATH}` 或 `.env` 配置文件存在以下问题：\n"
        error_message += "--------------------------------------------------\n"
        for error in e.errors():
            field_path = " -> ".join(map(str, error['loc']))
            error_message += f"- **字段 '{field_path}'**: {error['msg']}\n"
        error_message += "--------------------------------------------------\n程序无法启动。"
        print(error_message)
        sys.exit(1)


config = _load_yaml(CONFIG_FILE_PATH)
if not isinstance(config, dict):
    print(f"严重错误: 配置文件 {CONFIG_FILE_PATH} 顶层必须是映射。程序无法启动。")
    sys.exit(1)

# 将环境变量注入到config字典中，以便Pydantic统一验证
if os.getenv('KOL_ACCOUNT_ID'):
    config['account_id'] = os.getenv('KOL_ACCOUNT_ID')
if os.getenv('REDIS_PASSWORD'):
    config.setdefault('redis', {})
    if isinstance(config['redis'], dict):
        config['redis']['password'] = os.getenv('REDIS_PASSWORD')

CONFIG = _validate(config)

ACCOUNT_ID = CONFIG.account_id
TZ = CONFIG.timezone
REDIS_CONFIG = CONFIG.redis.model_dump()
LOG_ROTATION_CONFIG = CONFIG.log_rotation.model_dump()
LOGGING_SWITCHES = CONFIG.logging_switches.model_dump()


def set_account_id(account_id: str):
    """在运行时设置当前账户ID，属性存储的 Redis Key 依赖它"""
    global ACCOUNT_ID
    ACCOUNT_ID = account_id
