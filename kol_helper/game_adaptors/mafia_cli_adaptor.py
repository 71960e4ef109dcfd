# -*- coding: utf-8 -*-
from kol_helper.entities import Effect, Familiar, Skill
from .base_adaptor import BaseCommandAdaptor, Command

class MafiaCliAdaptor(BaseCommandAdaptor):
    """
    针对 KoLmafia 命令行的具体适配器实现。
    """
    EDUCATE_SUFFIX = ".edu"

    def terminal_enhance(self, effect: Effect) -> Command:
        return Command("terminal", ("enhance", effect.name))

    def terminal_enquiry(self, effect: Effect) -> Command:
        return Command("terminal", ("enquiry", effect.name))

    def terminal_educate(self, skill: Skill) -> Command:
        return Command("terminal", ("educate", f"{skill.name.lower()}{self.EDUCATE_SUFFIX}"))

    def terminal_extrude(self, file_name: str) -> Command:
        return Command("terminal", ("extrude", file_name))

    def cast(self, skill: Skill, times: int = 1) -> Command:
        return Command("cast", (str(times), skill.name))

    def use_familiar(self, familiar: Familiar) -> Command:
        return Command("familiar", (familiar.name,))

    def uneffect(self, effect: Effect) -> Command:
        return Command("uneffect", (effect.name,))
