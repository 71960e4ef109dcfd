# -*- coding: utf-8 -*-
"""
类型化的属性访问层。

每个已知属性键在 `PROPERTY_TYPES` 中登记了类型，读取时在这里统一校验；
资源模块只调用 `get()`，不直接接触存储中的原始字符串。
"""
import logging

from pydantic import TypeAdapter, ValidationError

from kol_helper.constants import PROPERTY_TYPES
from kol_helper.context import get_store
from kol_helper.entities import Monster
from kol_helper.logging_service import LogType, format_and_log

_ADAPTERS = {
    "int": TypeAdapter(int),
    "str": TypeAdapter(str),
}

_DEFAULTS = {
    "int": 0,
    "str": "",
    "monster": None,
}


def get_type(key: str) -> str:
    return PROPERTY_TYPES.get(key, "str")


def _parse(key: str, raw):
    prop_type = get_type(key)
    if prop_type == "monster":
        raw = str(raw).strip()
        return Monster.get(raw) if raw else None
    return _ADAPTERS[prop_type].validate_python(raw)


def get(key: str):
    """读取一个属性并转换为登记的类型；缺失或格式错误时返回该类型的默认值。"""
    raw = get_store().get_value(key)
    if raw is None:
        return _DEFAULTS[get_type(key)]
    try:
        return _parse(key, raw)
    except ValidationError as e:
        format_and_log(LogType.ERROR, "属性格式错误", {'键': key, '原始值': raw, '错误': e.errors()[0]['msg']}, level=logging.ERROR)
        return _DEFAULTS[get_type(key)]


def set_property(key: str, value):
    """写入一个属性。实体按名称保存，None 保存为空字符串。"""
    if value is None:
        payload = ""
    elif hasattr(value, "name"):
        payload = value.name
    else:
        payload = str(value)
    get_store().save_value(key, payload)
