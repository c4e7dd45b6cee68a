from __future__ import annotations

from relicbar.domain.state import RunState
from relicbar.services.encounter_service import EncounterService
from tests.helpers.scripted_rng import ScriptedRNG


def _state(rng: ScriptedRNG) -> RunState:
    state = RunState(rng=rng)
    state.phase = "selecting_encounter"
    return state


def test_event_heal_branch() -> None:
    state = _state(ScriptedRNG(ints=[0], choice_indices=[1], seed=1))
    roland = state.party[1]
    roland.current_hp = 10

    EncounterService().resolve_event(state)

    assert roland.current_hp == 16
    assert state.messages.snapshot()[-1].text == "Event: Roland rests by the altar and recovers 6 HP."
    assert state.phase == "selecting_encounter"
    assert len(state.options) == 3


def test_event_relic_branch() -> None:
    state = _state(ScriptedRNG(ints=[1], floats=[0.9], seed=1))

    EncounterService().resolve_event(state)

    assert [relic.kind for relic in state.relics] == ["overlap_charm"]
    assert state.messages.snapshot()[-1].kind == "success"


def test_event_trap_branch() -> None:
    state = _state(ScriptedRNG(ints=[2], choice_indices=[2], seed=1))

    EncounterService().resolve_event(state)

    mira = state.party[2]
    assert mira.current_hp == mira.max_hp - 5
    assert state.messages.snapshot()[-1].kind == "warning"


def test_shop_is_flavour_only() -> None:
    state = _state(ScriptedRNG(seed=1))
    party_hp = [member.current_hp for member in state.party]

    EncounterService().resolve_shop(state)

    assert [member.current_hp for member in state.party] == party_hp
    assert state.relics == []
    assert state.messages.snapshot()[-1].text.startswith("Shop:")
    assert len(state.options) == 3
