# -*- coding: utf-8 -*-
"""
Frumious Bandersnatch：配合 Ode to Booze 提供每日若干次免费逃跑。
"""
import logging
from typing import Iterable

from kol_helper import properties
from kol_helper.constants import PROP_BANDER_RUNAWAYS
from kol_helper.entities import Effect, Familiar, Skill
from kol_helper.lib import (
    can_remember_song,
    familiar_weight,
    get_active_songs,
    have as _have,
    is_current_familiar,
    uneffect,
    use_familiar,
    use_skill,
    weight_adjustment,
)
from kol_helper.logging_service import LogType, format_and_log

familiar = Familiar.get("Frumious Bandersnatch")

ode_skill = Skill.get("The Ode to Booze")
ode_effect = Effect.get("Ode to Booze")


def have() -> bool:
    """饲养箱中是否有 Bandersnatch"""
    return _have(familiar)


def get_runaways() -> int:
    """
    今天已使用的免费逃跑次数。
    该计数与 Stomping Boots 共用。
    """
    return properties.get(PROP_BANDER_RUNAWAYS)


def get_max_runaways(consider_weight_adjustment: bool = True) -> int:
    """按宠物重量计算今天的免费逃跑总次数，每 5 磅一次。"""
    weight_buffs = weight_adjustment() if consider_weight_adjustment else 0
    return (familiar_weight(familiar) + weight_buffs) // 5


def get_remaining_runaways(consider_weight_adjustment: bool = True) -> int:
    return max(0, get_max_runaways(consider_weight_adjustment) - get_runaways())


def could_runaway(consider_weight_adjustment: bool = True) -> bool:
    """理论上能否免费逃跑，不考虑当前宠物和 Ode 效果。"""
    return have() and get_remaining_runaways(consider_weight_adjustment) > 0


def can_runaway() -> bool:
    """现在能否立即免费逃跑。"""
    return is_current_familiar(familiar) and could_runaway() and _have(ode_effect)


def prepare_runaway(songs_to_remove: Iterable[Effect]) -> bool:
    """
    为免费逃跑做准备：施放 Ode to Booze 并带上 Bandersnatch。

    歌曲栏位已满时，按 `songs_to_remove` 的顺序移除第一首成功移除的生效歌曲。
    任一步骤失败都返回 False，已经生效的步骤不会回滚。
    """
    if not _have(ode_effect):
        if not _have(ode_skill):
            format_and_log(LogType.DEBUG, "Bandersnatch", {'阶段': '准备中止', '原因': f'未学会 {ode_skill}'})
            return False

        if not can_remember_song():
            active_songs = get_active_songs()

            for song in songs_to_remove:
                if song in active_songs and uneffect(song):
                    break

        if not use_skill(ode_skill):
            format_and_log(LogType.WARNING, "Bandersnatch", {'阶段': '准备失败', '原因': f'{ode_skill} 施放失败'}, level=logging.WARNING)
            return False

    return use_familiar(familiar)
