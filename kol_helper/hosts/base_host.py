# -*- coding: utf-8 -*-
from abc import ABC, abstractmethod
from typing import List, Optional

from kol_helper.entities import Effect, Entity, Familiar, Item, Path
from kol_helper.game_adaptors.base_adaptor import Command

class BaseHost(ABC):
    """
    自动化宿主抽象基类。
    宿主负责真正执行指令并持有游戏状态，本库只通过这些接口读取和下发。
    """

    # --- 指令 ---
    @abstractmethod
    def execute(self, command: Command) -> bool:
        """执行一条指令，返回宿主是否报告成功。"""
        pass

    # --- 查询 ---
    @abstractmethod
    def have(self, entity: Entity) -> bool:
        """是否拥有：宠物在饲养箱中、技能已学会、效果生效中、物品在背包中。"""
        pass

    @abstractmethod
    def have_in_campground(self, item: Item) -> bool:
        """物品是否安装在营地中。"""
        pass

    @abstractmethod
    def current_familiar(self) -> Optional[Familiar]:
        pass

    @abstractmethod
    def familiar_weight(self, familiar: Familiar) -> int:
        """宠物的基础重量，不含任何加成。"""
        pass

    @abstractmethod
    def weight_adjustment(self) -> int:
        """当前所有宠物重量加成之和。"""
        pass

    @abstractmethod
    def my_path(self) -> Path:
        pass

    @abstractmethod
    def get_active_songs(self) -> List[Effect]:
        """当前生效的 AT 歌曲效果。"""
        pass

    @abstractmethod
    def get_song_limit(self) -> int:
        """可同时保持的歌曲数量上限。"""
        pass
