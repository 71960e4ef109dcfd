# -*- coding: utf-8 -*-
from typing import Dict, List, Optional

from kol_helper.entities import Effect, Entity, Familiar, Item, Path
from kol_helper.game_adaptors.base_adaptor import Command
from .base_host import BaseHost

class MemoryHost(BaseHost):
    """
    完全在内存中的宿主实现，用于演练 (dry run) 与测试。
    所有查询结果都是可直接修改的字段；执行过的指令按顺序记录在 `commands` 中。
    """

    def __init__(self):
        self.owned = set()
        self.campground = set()
        self.familiar: Optional[Familiar] = None
        self.weights: Dict[Familiar, int] = {}
        self.adjustment = 0
        self.path = Path.get("None")
        self.active_songs: List[Effect] = []
        self.song_limit = 3
        self.command_results: Dict[str, bool] = {}
        self.commands: List[Command] = []

    def set_result(self, command: Command, success: bool):
        """设定某条指令的执行结果，未设定的指令默认成功。"""
        self.command_results[str(command)] = success

    @property
    def command_lines(self) -> List[str]:
        return [str(command) for command in self.commands]

    def execute(self, command: Command) -> bool:
        self.commands.append(command)
        return self.command_results.get(str(command), True)

    def have(self, entity: Entity) -> bool:
        return entity in self.owned

    def have_in_campground(self, item: Item) -> bool:
        return item in self.campground

    def current_familiar(self) -> Optional[Familiar]:
        return self.familiar

    def familiar_weight(self, familiar: Familiar) -> int:
        return self.weights.get(familiar, 0)

    def weight_adjustment(self) -> int:
        return self.adjustment

    def my_path(self) -> Path:
        return self.path

    def get_active_songs(self) -> List[Effect]:
        return list(self.active_songs)

    def get_song_limit(self) -> int:
        return self.song_limit
