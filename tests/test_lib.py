import logging

from kol_helper import lib
from kol_helper.entities import Effect, Familiar, Skill
from kol_helper.game_adaptor import Command


def test_cli_execute_logs_command(host, caplog):
    command = Command("terminal", ("enhance", "items.enh"))
    host.set_result(command, False)

    with caplog.at_level(logging.INFO, logger="kol_helper"):
        assert not lib.cli_execute(command)

    assert host.commands == [command]
    assert "terminal enhance items.enh" in caplog.text
    assert "失败" in caplog.text


def test_can_remember_song(host):
    host.song_limit = 2
    host.active_songs = [Effect.get("Polka of Plenty")]
    assert lib.can_remember_song()

    host.active_songs.append(Effect.get("Ur-Kel's Aria of Annoyance"))
    assert not lib.can_remember_song()


def test_is_current_familiar(host):
    mosquito = Familiar.get("Mosquito")
    assert not lib.is_current_familiar(mosquito)
    host.familiar = mosquito
    assert lib.is_current_familiar(mosquito)


def test_actions_build_commands(host):
    assert lib.use_skill(Skill.get("The Ode to Booze"))
    assert lib.use_familiar(Familiar.get("Mosquito"))
    assert lib.uneffect(Effect.get("Ode to Booze"))
    assert host.command_lines == ["cast 1 The Ode to Booze", "familiar Mosquito", "uneffect Ode to Booze"]
