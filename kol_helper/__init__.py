# -*- coding: utf-8 -*-
"""
kol_helper: Kingdom of Loathing 脚本辅助库。

使用前需要通过 `kol_helper.context.set_host()` 与 `set_store()` 注入宿主和属性存储。
"""
__version__ = "0.1.0"
