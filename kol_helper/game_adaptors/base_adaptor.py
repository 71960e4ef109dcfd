# -*- coding: utf-8 -*-
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple

from kol_helper.entities import Effect, Familiar, Skill


@dataclass(frozen=True)
class Command:
    """
    一条发送给宿主的指令。以结构化形式保存，便于测试直接比较，
    `str()` 得到宿主可执行的命令行。
    """
    verb: str
    args: Tuple[str, ...] = ()

    def __str__(self) -> str:
        return " ".join((self.verb,) + tuple(self.args))


class BaseCommandAdaptor(ABC):
    """
    指令适配器抽象基类。
    定义了所有指令适配器必须实现的接口，确保资源模块可以统一调用。
    """

    # --- Source terminal ---
    @abstractmethod
    def terminal_enhance(self, effect: Effect) -> Command:
        """生成 enhance 指令。"""
        pass

    @abstractmethod
    def terminal_enquiry(self, effect: Effect) -> Command:
        """生成 enquiry 指令。"""
        pass

    @abstractmethod
    def terminal_educate(self, skill: Skill) -> Command:
        """生成 educate 指令。"""
        pass

    @abstractmethod
    def terminal_extrude(self, file_name: str) -> Command:
        """生成 extrude 指令。"""
        pass

    # --- 通用 ---
    @abstractmethod
    def cast(self, skill: Skill, times: int = 1) -> Command:
        """施放技能指令。"""
        pass

    @abstractmethod
    def use_familiar(self, familiar: Familiar) -> Command:
        """切换当前宠物指令。"""
        pass

    @abstractmethod
    def uneffect(self, effect: Effect) -> Command:
        """移除效果指令。"""
        pass
