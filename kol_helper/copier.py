# -*- coding: utf-8 -*-
from typing import Callable, Optional

from kol_helper.entities import Monster


class Copier:
    """
    复制类机制 (Digitize、各类相机、传真等) 的统一接口：
    - could_copy: 今天理论上还能否复制
    - prepare: 让复制立即可用所需的准备动作，没有则为 None
    - can_copy: 现在能否立即复制
    - copied_monster: 当前被复制的怪物
    - fight_copy: 与复制怪物战斗的动作，没有则为 None
    """

    def __init__(
        self,
        could_copy: Callable[[], bool],
        prepare: Optional[Callable[[], bool]],
        can_copy: Callable[[], bool],
        copied_monster: Callable[[], Optional[Monster]],
        fight_copy: Optional[Callable[[], bool]] = None,
    ):
        self._could_copy = could_copy
        self._prepare = prepare
        self._can_copy = can_copy
        self._copied_monster = copied_monster
        self._fight_copy = fight_copy

    @property
    def could_copy(self) -> Callable[[], bool]:
        return self._could_copy

    @property
    def prepare(self) -> Optional[Callable[[], bool]]:
        return self._prepare

    @property
    def can_copy(self) -> Callable[[], bool]:
        return self._can_copy

    @property
    def copied_monster(self) -> Callable[[], Optional[Monster]]:
        return self._copied_monster

    @property
    def fight_copy(self) -> Optional[Callable[[], bool]]:
        return self._fight_copy
