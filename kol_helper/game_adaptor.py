# -*- coding: utf-8 -*-
"""
指令适配层 (Game Adaptor) - 工厂模块

该模块作为适配器的统一入口。它实例化一个具体的指令适配器，
供项目中所有资源模块统一调用。
"""
from kol_helper.game_adaptors.base_adaptor import Command
from kol_helper.game_adaptors.mafia_cli_adaptor import MafiaCliAdaptor

def _create_adaptor():
    """
    工厂函数，创建并返回一个指令适配器实例。
    """
    return MafiaCliAdaptor()

# --- 全局单例 ---
# 在模块加载时创建适配器实例，项目中所有地方都导入并使用这个实例。
game_adaptor = _create_adaptor()

# --- 模块级代理 ---
terminal_enhance = game_adaptor.terminal_enhance
terminal_enquiry = game_adaptor.terminal_enquiry
terminal_educate = game_adaptor.terminal_educate
terminal_extrude = game_adaptor.terminal_extrude
cast = game_adaptor.cast
use_familiar = game_adaptor.use_familiar
uneffect = game_adaptor.uneffect

__all__ = [
    "Command", "game_adaptor",
    "terminal_enhance", "terminal_enquiry", "terminal_educate", "terminal_extrude",
    "cast", "use_familiar", "uneffect",
]
