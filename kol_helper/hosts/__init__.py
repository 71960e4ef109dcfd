# -*- coding: utf-8 -*-
from .base_host import BaseHost
from .memory_host import MemoryHost

__all__ = ["BaseHost", "MemoryHost"]
