"""UI-agnostic run controller exposing the game's command surface."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from relicbar.core.rng import RNG
from relicbar.core.types import GamePhase
from relicbar.domain.action_bar import ActionBar
from relicbar.domain.encounters import EncounterOption, EnemyEncounter
from relicbar.domain.entities import PartyMember
from relicbar.domain.messages import GameMessage
from relicbar.domain.relics import Relic
from relicbar.domain.state import RunState
from relicbar.services.battle_service import BattleService, TurnResult
from relicbar.services.encounter_service import EncounterService
from relicbar.services.factories import create_enemy_encounter

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OptionChoiceResult:
    """Outcome of a choose-option command."""

    ok: bool
    message: str


class RogueliteGame:
    """
    Top-level state machine for a single run.

    Phases move awaiting_command -> selecting_encounter -> combat and back, and
    end in game_over when the party is wiped. Every command runs to completion
    before returning. Invalid commands report ok=False and leave the run as it was.

    One instance owns one random stream. Replaying the same commands against
    the same seed reproduces the same message log.
    """

    def __init__(
        self,
        seed: int | None = None,
        *,
        encounter_service: EncounterService | None = None,
        battle_service: BattleService | None = None,
    ) -> None:
        self._rng = RNG(seed)
        self._encounter_service = encounter_service or EncounterService()
        self._battle_service = battle_service or BattleService(self._encounter_service)
        self._state = RunState(rng=self._rng)
        self.reset()

    # -----------------------
    # Commands
    # -----------------------
    def reset(self) -> None:
        """Discard the current run and return to awaiting_command. The rng stream continues."""
        self._state = RunState(rng=self._rng)
        logger.debug("Run reset")

    def start_new_run(self) -> None:
        self.reset()
        self._state.phase = "selecting_encounter"
        self._encounter_service.refresh_options(self._state)
        self._state.add_message("A new expedition begins. Choose where to go.", "success")

    def try_choose_option(self, index: int) -> OptionChoiceResult:
        state = self._state
        if state.phase != "selecting_encounter":
            logger.warning("Option %d rejected in phase %s", index, state.phase)
            return OptionChoiceResult(ok=False, message="Finish the current encounter first.")
        if index < 0 or index >= len(state.options):
            logger.warning("Option index %d out of range", index)
            return OptionChoiceResult(ok=False, message="That is not a valid option.")

        option = state.options[index]
        state.options = []
        logger.debug("Chose option %d: %s", index, option.encounter_type)

        if option.encounter_type == "normal":
            encounter = create_enemy_encounter("normal", level=state.level)
            state.add_message(f"You run into '{encounter.enemy.name}'!", "warning")
            self._battle_service.begin_combat(state, encounter)
        elif option.encounter_type == "elite":
            encounter = create_enemy_encounter("elite", level=state.level)
            state.add_message(f"The elite '{encounter.enemy.name}' blocks the way!", "warning")
            self._battle_service.begin_combat(state, encounter)
        elif option.encounter_type == "event":
            self._encounter_service.resolve_event(state)
        elif option.encounter_type == "shop":
            self._encounter_service.resolve_shop(state)
        else:
            raise ValueError(f"Unknown encounter type: {option.encounter_type}")

        return OptionChoiceResult(ok=True, message=f"Heading for '{option.label}'.")

    def try_resolve_turn(self, manual_position: float | None = None) -> TurnResult:
        return self._battle_service.resolve_turn(self._state, manual_position)

    def clear_last_turn_log(self) -> None:
        self._state.last_turn_log = ()

    # -----------------------
    # Views
    # -----------------------
    def get_status(self) -> str:
        state = self._state
        party = ", ".join(f"{member.name} {member.current_hp}/{member.max_hp}" for member in state.party)
        relics = ", ".join(relic.name for relic in state.relics) if state.relics else "none"
        if state.encounter is not None:
            enemy = state.encounter.enemy
            encounter = f"{enemy.name} {enemy.current_hp}/{enemy.max_hp}"
        elif state.phase == "selecting_encounter":
            encounter = "choosing a path"
        elif state.phase == "game_over":
            encounter = "expedition over"
        else:
            encounter = "preparing"
        return f"Level {state.level} | Party: {party} | Encounter: {encounter} | Relics: {relics}"

    def describe_options(self) -> List[str]:
        return [
            f"{index}. [{option.encounter_type.title()}] {option.label}"
            for index, option in enumerate(self._state.options, start=1)
        ]

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def messages(self) -> Tuple[GameMessage, ...]:
        return self._state.messages.snapshot()

    @property
    def party(self) -> Tuple[PartyMember, ...]:
        return tuple(self._state.party)

    @property
    def relics(self) -> Tuple[Relic, ...]:
        return tuple(self._state.relics)

    @property
    def options(self) -> Tuple[EncounterOption, ...]:
        return tuple(self._state.options)

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def level(self) -> int:
        return self._state.level

    @property
    def current_action_bar(self) -> ActionBar | None:
        return self._state.action_bar

    @property
    def current_encounter(self) -> EnemyEncounter | None:
        return self._state.encounter

    @property
    def last_turn_log(self) -> Tuple[GameMessage, ...]:
        return self._state.last_turn_log

    @property
    def last_lock_position(self) -> float | None:
        return self._state.last_lock_position
