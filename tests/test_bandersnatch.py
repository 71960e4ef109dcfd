from kol_helper import game_adaptor
from kol_helper.entities import Effect, Familiar
from kol_helper.resources import bandersnatch

ODE_COMMAND = game_adaptor.cast(bandersnatch.ode_skill)
FAMILIAR_COMMAND = game_adaptor.use_familiar(bandersnatch.familiar)

POLKA = Effect.get("Polka of Plenty")
PHAT = Effect.get("Fat Leon's Phat Loot Lyric")
MADRIGAL = Effect.get("The Moxious Madrigal")


def _own_bandersnatch(host, weight=20):
    host.owned.add(bandersnatch.familiar)
    host.weights[bandersnatch.familiar] = weight


def test_have(host):
    assert not bandersnatch.have()
    host.owned.add(bandersnatch.familiar)
    assert bandersnatch.have()


def test_runaway_counts(host, store):
    _own_bandersnatch(host, weight=20)
    host.adjustment = 7
    store.save_value("_banderRunaways", 2)

    assert bandersnatch.get_runaways() == 2
    assert bandersnatch.get_max_runaways() == 5
    assert bandersnatch.get_max_runaways(False) == 4
    assert bandersnatch.get_remaining_runaways() == 3
    assert bandersnatch.get_remaining_runaways(False) == 2


def test_remaining_runaways_never_negative(host, store):
    _own_bandersnatch(host, weight=10)
    host.adjustment = -3
    store.save_value("_banderRunaways", 9)

    assert bandersnatch.get_max_runaways() == 1
    assert bandersnatch.get_remaining_runaways() == 0
    assert bandersnatch.get_remaining_runaways(False) == 0
    assert not bandersnatch.could_runaway()


def test_could_runaway_requires_ownership(host, store):
    host.weights[bandersnatch.familiar] = 30
    assert not bandersnatch.could_runaway()

    host.owned.add(bandersnatch.familiar)
    assert bandersnatch.could_runaway()


def test_can_runaway_requires_current_familiar_and_ode(host, store):
    _own_bandersnatch(host)
    assert bandersnatch.could_runaway()
    assert not bandersnatch.can_runaway()

    host.familiar = bandersnatch.familiar
    assert not bandersnatch.can_runaway()

    host.owned.add(bandersnatch.ode_effect)
    assert bandersnatch.can_runaway()

    host.familiar = Familiar.get("Mosquito")
    assert not bandersnatch.can_runaway()


def test_prepare_with_ode_active_only_switches_familiar(host, store):
    host.owned.add(bandersnatch.ode_effect)

    assert bandersnatch.prepare_runaway([POLKA])
    assert host.commands == [FAMILIAR_COMMAND]


def test_prepare_fails_without_ode_skill(host, store):
    assert not bandersnatch.prepare_runaway([POLKA])
    assert host.commands == []


def test_prepare_casts_ode_when_song_slot_free(host, store):
    host.owned.add(bandersnatch.ode_skill)
    host.active_songs = [POLKA]

    assert bandersnatch.prepare_runaway([POLKA])
    assert host.commands == [ODE_COMMAND, FAMILIAR_COMMAND]


def test_prepare_stops_after_first_successful_removal(host, store):
    host.owned.add(bandersnatch.ode_skill)
    host.song_limit = 2
    host.active_songs = [POLKA, PHAT]

    assert bandersnatch.prepare_runaway([POLKA, PHAT])
    assert host.command_lines == [
        "uneffect Polka of Plenty",
        "cast 1 The Ode to Booze",
        "familiar Frumious Bandersnatch",
    ]


def test_prepare_skips_inactive_and_failed_removals(host, store):
    host.owned.add(bandersnatch.ode_skill)
    host.song_limit = 2
    host.active_songs = [POLKA, PHAT]
    host.set_result(game_adaptor.uneffect(POLKA), False)

    assert bandersnatch.prepare_runaway([MADRIGAL, POLKA, PHAT])
    assert host.command_lines == [
        "uneffect Polka of Plenty",
        "uneffect Fat Leon's Phat Loot Lyric",
        "cast 1 The Ode to Booze",
        "familiar Frumious Bandersnatch",
    ]


def test_prepare_fails_when_ode_cast_rejected(host, store):
    host.owned.add(bandersnatch.ode_skill)
    host.set_result(ODE_COMMAND, False)

    assert not bandersnatch.prepare_runaway([])
    assert host.commands == [ODE_COMMAND]


def test_prepare_reports_familiar_switch_result(host, store):
    host.owned.add(bandersnatch.ode_effect)
    host.set_result(FAMILIAR_COMMAND, False)

    assert not bandersnatch.prepare_runaway([])
    assert host.commands == [FAMILIAR_COMMAND]
