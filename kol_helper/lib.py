# -*- coding: utf-8 -*-
"""
宿主调用的薄封装，资源模块统一通过这里访问宿主。
"""
import logging
from typing import List

from kol_helper import game_adaptor
from kol_helper.context import get_host
from kol_helper.entities import Effect, Entity, Familiar, Item, Path, Skill
from kol_helper.game_adaptor import Command
from kol_helper.logging_service import LogType, format_and_log


def cli_execute(command: Command) -> bool:
    """下发一条指令并记录结果。"""
    success = get_host().execute(command)
    format_and_log(LogType.CMD_SENT, "指令已发送", {'指令': str(command), '结果': '成功' if success else '失败'},
                   level=logging.INFO if success else logging.WARNING)
    return success


def have(entity: Entity) -> bool:
    return get_host().have(entity)


def have_in_campground(item: Item) -> bool:
    return get_host().have_in_campground(item)


def is_current_familiar(familiar: Familiar) -> bool:
    return get_host().current_familiar() == familiar


def familiar_weight(familiar: Familiar) -> int:
    return get_host().familiar_weight(familiar)


def weight_adjustment() -> int:
    return get_host().weight_adjustment()


def my_path() -> Path:
    return get_host().my_path()


def get_active_songs() -> List[Effect]:
    return get_host().get_active_songs()


def get_song_limit() -> int:
    return get_host().get_song_limit()


def can_remember_song() -> bool:
    """还能否再保持一首新歌。"""
    return len(get_active_songs()) < get_song_limit()


def uneffect(effect: Effect) -> bool:
    return cli_execute(game_adaptor.uneffect(effect))


def use_skill(skill: Skill, times: int = 1) -> bool:
    return cli_execute(game_adaptor.cast(skill, times))


def use_familiar(familiar: Familiar) -> bool:
    return cli_execute(game_adaptor.use_familiar(familiar))
