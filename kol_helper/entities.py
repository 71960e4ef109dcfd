# -*- coding: utf-8 -*-
"""
游戏实体句柄。

每个句柄只是一个按名称解析的不可变标识，真正的实体数据由宿主持有。
同一类中的名称不区分大小写：`Skill.get("digitize")` 与
`Skill.get("Digitize")` 得到同一个句柄。
"""
from pydantic import BaseModel, ConfigDict, field_validator

# (实体类, 小写名称) -> 首次解析得到的句柄
_REGISTRY = {}


class Entity(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError(f"{cls.__name__} name must not be empty")
        return value

    @classmethod
    def get(cls, name: str):
        """按名称解析句柄，首次解析时登记为规范写法。"""
        key = (cls, name.strip().casefold())
        entity = _REGISTRY.get(key)
        if entity is None:
            entity = cls(name=name)
            _REGISTRY[key] = entity
        return entity

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.name.casefold() == other.name.casefold()

    def __hash__(self):
        return hash((type(self).__name__, self.name.casefold()))

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"


class Familiar(Entity):
    pass

class Item(Entity):
    pass

class Effect(Entity):
    pass

class Skill(Entity):
    pass

class Monster(Entity):
    pass

class Path(Entity):
    pass
