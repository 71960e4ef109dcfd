# -*- coding: utf-8 -*-
import pytest

from kol_helper import context
from kol_helper.hosts import MemoryHost
from kol_helper.property_store import MemoryPropertyStore


@pytest.fixture
def host():
    memory_host = MemoryHost()
    context.set_host(memory_host)
    yield memory_host
    context.set_host(None)


@pytest.fixture
def store():
    memory_store = MemoryPropertyStore()
    context.set_store(memory_store)
    yield memory_store
    context.set_store(None)
