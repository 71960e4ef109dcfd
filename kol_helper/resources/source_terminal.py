# -*- coding: utf-8 -*-
"""
Source terminal：营地中的终端，提供 enhance / enquiry / educate / extrude 四项功能，
以及 Digitize、Duplicate、Enhance 的每日次数计算。
"""
from enum import Enum
from types import MappingProxyType
from typing import List, Optional, Sequence, Union

from kol_helper import game_adaptor, properties
from kol_helper.constants import (
    PROP_DIGITIZE_MONSTER,
    PROP_DIGITIZE_MONSTER_COUNT,
    PROP_DIGITIZE_USES,
    PROP_DUPLICATE_USES,
    PROP_ENHANCE_USES,
    PROP_PORTSCAN_USES,
    PROP_TERMINAL_CHIPS,
    PROP_TERMINAL_EDUCATE_1,
    PROP_TERMINAL_EDUCATE_2,
    PROP_TERMINAL_GRAM,
    PROP_TERMINAL_PRAM,
)
from kol_helper.copier import Copier
from kol_helper.entities import Effect, Item, Monster, Path, Skill
from kol_helper.lib import cli_execute, have_in_campground, my_path
from kol_helper.logging_service import LogType, format_and_log
from kol_helper.utils import array_equals

item = Item.get("Source terminal")

EDUCATE_SUFFIX = ".edu"
THE_SOURCE = Path.get("The Source")


def have() -> bool:
    """终端是否已安装在营地中"""
    return have_in_campground(item)


class _Catalog:
    """只读目录：属性访问单个条目，`values()` 列出全部条目。"""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._entries = tuple(
            value for key, value in vars(cls).items() if not key.startswith("_")
        )

    @classmethod
    def values(cls) -> tuple:
        return cls._entries

    @classmethod
    def includes(cls, entry) -> bool:
        return entry in cls._entries


class Buffs(_Catalog):
    """
    Enhance 可获得的效果

    - Items: +30% Item Drop
    - Meat: +60% Meat Drop
    - Init: +50% Initiative
    - Critical: +10% chance of Critical Hit, +10% chance of Spell Critical Hit
    - Damage: +5 Prismatic Damage
    - Substats: +3 Stats Per Fight
    """
    Items = Effect.get("items.enh")
    Meat = Effect.get("meat.enh")
    Init = Effect.get("init.enh")
    Critical = Effect.get("critical.enh")
    Damage = Effect.get("damage.enh")
    Substats = Effect.get("substats.enh")


def enhance(buff: Effect) -> bool:
    """从终端获取一个 enhance 效果，不在 `Buffs` 中的效果直接返回 False。"""
    if not Buffs.includes(buff):
        format_and_log(LogType.DEBUG, "Source terminal", {'操作': 'enhance', '拒绝': str(buff)})
        return False

    return cli_execute(game_adaptor.terminal_enhance(buff))


class RolloverBuffs(_Catalog):
    """Enquiry 可获得的跨日效果"""
    # +5 Familiar Weight
    Familiar = Effect.get("familiar.enq")
    # +25 ML
    Monsters = Effect.get("monsters.enq")
    # +5 Prismatic Resistance
    Protect = Effect.get("protect.enq")
    # +100% Muscle, +100% Mysticality, +100% Moxie
    Stats = Effect.get("stats.enq")


def enquiry(rollover_buff: Effect) -> bool:
    """向终端 enquiry 一个跨日效果，不在 `RolloverBuffs` 中的效果直接返回 False。"""
    if not RolloverBuffs.includes(rollover_buff):
        format_and_log(LogType.DEBUG, "Source terminal", {'操作': 'enquiry', '拒绝': str(rollover_buff)})
        return False

    return cli_execute(game_adaptor.terminal_enquiry(rollover_buff))


class Skills(_Catalog):
    """Educate 可学习的技能"""
    # 每场战斗一次，从敌人身上收集 Source essence
    Extract = Skill.get("Extract")
    # 每天 1-3 次，震慑并把怪物变成游荡怪
    Digitize = Skill.get("Digitize")
    # 每场战斗一次，震慑并造成敌人 25% HP 的伤害
    Compress = Skill.get("Compress")
    # 每场战斗一次、每天一次 (The Source 中五次)，怪物属性与掉落翻倍
    Duplicate = Skill.get("Duplicate")
    # 每场战斗一次、每天三次，下回合遭遇政府特工/Source Agent
    Portscan = Skill.get("Portscan")
    # 每场战斗一次，MP 上限 +100% 并回复 1000 MP，冷却 30 回合
    Turbo = Skill.get("Turbo")


SkillOrPair = Union[Skill, Sequence[Skill]]


def _as_skill_list(skills: SkillOrPair) -> List[Skill]:
    if isinstance(skills, Skill):
        return [skills]
    return list(skills)[:2]


def educate(skills: SkillOrPair) -> bool:
    """
    让终端提供指定技能 (最多两个)。

    当前技能已与目标逐项一致时不下发任何指令。只要目标技能全部合法就返回 True，
    不检查每条 educate 指令各自的执行结果。
    """
    skills_array = _as_skill_list(skills)
    if array_equals(skills_array, get_skills()):
        return True

    invalid = [skill for skill in skills_array if not Skills.includes(skill)]
    if invalid:
        format_and_log(LogType.DEBUG, "Source terminal", {'操作': 'educate', '拒绝': ", ".join(map(str, invalid))})
        return False

    for skill in skills_array:
        cli_execute(game_adaptor.terminal_educate(skill))

    return True


def get_skills() -> List[Skill]:
    """当前终端提供的技能，按栏位顺序"""
    names = []
    for key in (PROP_TERMINAL_EDUCATE_1, PROP_TERMINAL_EDUCATE_2):
        value = properties.get(key).strip()
        if value.endswith(EDUCATE_SUFFIX):
            value = value[:-len(EDUCATE_SUFFIX)].strip()
        # 空栏位或只剩后缀的值不算已学技能
        if value:
            names.append(value)
    return [Skill.get(name) for name in names]


def is_current_skill(skills: SkillOrPair) -> bool:
    """
    请求的技能是否都在当前技能中。
    注意这是子集判断，与 `educate` 的逐项相等判断不同。
    """
    current_skills = get_skills()
    return all(skill in current_skills for skill in _as_skill_list(skills))


# 终端可以生成的物品 -> extrude 文件名
Items = MappingProxyType({
    Item.get("browser cookie"): "food.ext",
    Item.get("hacked gibson"): "booze.ext",
    Item.get("Source shades"): "goggles.ext",
    Item.get("Source terminal GRAM chip"): "gram.ext",
    Item.get("Source terminal PRAM chip"): "pram.ext",
    Item.get("Source terminal SPAM chip"): "spam.ext",
    Item.get("Source terminal CRAM chip"): "cram.ext",
    Item.get("Source terminal DRAM chip"): "dram.ext",
    Item.get("Source terminal TRAM chip"): "tram.ext",
    Item.get("software bug"): "familiar.ext",
})


def extrude(item: Item) -> bool:
    """从终端生成一个物品 (每天最多三次)"""
    file_name = Items.get(item)
    if not file_name:
        format_and_log(LogType.DEBUG, "Source terminal", {'操作': 'extrude', '拒绝': str(item)})
        return False

    return cli_execute(game_adaptor.terminal_extrude(file_name))


class Chip(str, Enum):
    INGRAM = "INGRAM"
    DIAGRAM = "DIAGRAM"
    ASHRAM = "ASHRAM"
    SCRAM = "SCRAM"
    TRIGRAM = "TRIGRAM"
    CRAM = "CRAM"
    DRAM = "DRAM"
    TRAM = "TRAM"


def get_chips() -> List[str]:
    """已安装的芯片名称。不校验是否为已知芯片。"""
    raw = properties.get(PROP_TERMINAL_CHIPS)
    return [chip.strip() for chip in raw.split(",") if chip.strip()]


# --- Digitize ---

def get_digitize_uses() -> int:
    return properties.get(PROP_DIGITIZE_USES)


def get_digitize_monster() -> Optional[Monster]:
    """当前被 digitize 的怪物，没有则为 None"""
    return properties.get(PROP_DIGITIZE_MONSTER)


def get_digitize_monster_count() -> int:
    """上次施放 digitize 以来遇到的数字化怪物次数"""
    return properties.get(PROP_DIGITIZE_MONSTER_COUNT)


def get_maximum_digitize_uses() -> int:
    chips = get_chips()
    return 1 + (1 if Chip.TRAM in chips else 0) + (1 if Chip.TRIGRAM in chips else 0)


def get_digitize_uses_remaining() -> int:
    return get_maximum_digitize_uses() - get_digitize_uses()


def could_digitize() -> bool:
    return get_digitize_uses() < get_maximum_digitize_uses()


def prepare_digitize() -> bool:
    """Digitize 不在当前技能中时 educate 它"""
    if not is_current_skill(Skills.Digitize):
        return educate(Skills.Digitize)

    return True


def can_digitize() -> bool:
    """
    现在能否施放 Digitize。
    只考虑技能是否可用和今日剩余次数，不考虑 MP。
    """
    return could_digitize() and Skills.Digitize in get_skills()


Digitize = Copier(
    lambda: could_digitize(),
    lambda: prepare_digitize(),
    lambda: can_digitize(),
    lambda: get_digitize_monster(),
)


# --- Duplicate / Enhance / Portscan ---

def get_duplicate_uses() -> int:
    return properties.get(PROP_DUPLICATE_USES)


def get_enhance_uses() -> int:
    return properties.get(PROP_ENHANCE_USES)


def get_portscan_uses() -> int:
    return properties.get(PROP_PORTSCAN_USES)


def maximum_duplicate_uses() -> int:
    return 5 if my_path() == THE_SOURCE else 1


def duplicate_uses_remaining() -> int:
    return maximum_duplicate_uses() - get_duplicate_uses()


def maximum_enhance_uses() -> int:
    return 1 + len([chip for chip in get_chips() if chip in (Chip.CRAM, Chip.SCRAM)])


def enhance_uses_remaining() -> int:
    return maximum_enhance_uses() - get_enhance_uses()


def enhance_buff_duration() -> int:
    return 25 + properties.get(PROP_TERMINAL_PRAM) * 5 + (25 if Chip.INGRAM in get_chips() else 0)


def enquiry_buff_duration() -> int:
    return 50 + 10 * properties.get(PROP_TERMINAL_GRAM) + (50 if Chip.DIAGRAM in get_chips() else 0)
