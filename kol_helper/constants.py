# -*- coding: utf-8 -*-
"""
统一管理项目中的所有“魔法字符串”，便于维护和修改。
"""

# --- Redis Keys ---
# Base key for all tracked properties, one hash per account
BASE_KEY = "kol_helper:properties"

# --- Property Keys ---
# Bandersnatch (与 Stomping Boots 共用计数)
PROP_BANDER_RUNAWAYS = "_banderRunaways"

# Source terminal
PROP_TERMINAL_EDUCATE_1 = "sourceTerminalEducate1"
PROP_TERMINAL_EDUCATE_2 = "sourceTerminalEducate2"
PROP_TERMINAL_CHIPS = "sourceTerminalChips"
PROP_TERMINAL_PRAM = "sourceTerminalPram"
PROP_TERMINAL_GRAM = "sourceTerminalGram"
PROP_DIGITIZE_USES = "_sourceTerminalDigitizeUses"
PROP_DIGITIZE_MONSTER = "_sourceTerminalDigitizeMonster"
PROP_DIGITIZE_MONSTER_COUNT = "_sourceTerminalDigitizeMonsterCount"
PROP_DUPLICATE_USES = "_sourceTerminalDuplicateUses"
PROP_ENHANCE_USES = "_sourceTerminalEnhanceUses"
PROP_PORTSCAN_USES = "_sourceTerminalPortscanUses"

# 属性类型："int" / "str" / "monster"。未登记的键按字符串处理。
PROPERTY_TYPES = {
    PROP_BANDER_RUNAWAYS: "int",
    PROP_TERMINAL_EDUCATE_1: "str",
    PROP_TERMINAL_EDUCATE_2: "str",
    PROP_TERMINAL_CHIPS: "str",
    PROP_TERMINAL_PRAM: "int",
    PROP_TERMINAL_GRAM: "int",
    PROP_DIGITIZE_USES: "int",
    PROP_DIGITIZE_MONSTER: "monster",
    PROP_DIGITIZE_MONSTER_COUNT: "int",
    PROP_DUPLICATE_USES: "int",
    PROP_ENHANCE_USES: "int",
    PROP_PORTSCAN_USES: "int",
}
