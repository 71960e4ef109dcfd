# -*- coding: utf-8 -*-

# 这个文件用于存放全局的宿主实例和属性存储，资源模块通过它获取依赖，
# 测试则通过它注入内存实现。

_host_instance = None
_store_instance = None

def set_host(host_instance):
    """由上层脚本在初始化时调用，用于设置全局宿主实例。"""
    global _host_instance
    _host_instance = host_instance

def get_host():
    """由各个资源模块在需要时调用，用于获取全局宿主实例。"""
    if _host_instance is None:
        raise RuntimeError("Host has not been initialized yet.")
    return _host_instance

def set_store(store_instance):
    """由上层脚本在初始化时调用，用于设置全局属性存储。"""
    global _store_instance
    _store_instance = store_instance

def get_store():
    """由属性访问层调用。"""
    if _store_instance is None:
        raise RuntimeError("Property store has not been initialized yet.")
    return _store_instance
