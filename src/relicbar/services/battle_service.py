"""Battle service resolving action-bar combat turns."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Tuple

from relicbar.core.types import ActionType
from relicbar.domain.action_bar import ActionEvaluation
from relicbar.domain.encounters import EnemyEncounter
from relicbar.domain.entities import Enemy, PartyMember
from relicbar.domain.messages import GameMessage
from relicbar.domain.relics import ATTACK_BOOST_BONUS, has_attack_boost, roll_relic
from relicbar.domain.state import RunState
from relicbar.services.encounter_service import EncounterService
from relicbar.services.factories import build_action_bar

logger = logging.getLogger(__name__)

ATTACK_BASE_DAMAGE = 4
SKILL_BASE_HEAL = 3
REST_HEAL = 2
ELITE_LEVEL_GAIN = 2
NORMAL_LEVEL_GAIN = 1
ELITE_RELIC_CHANCE = 0.7
NORMAL_RELIC_CHANCE = 0.25


@dataclass(frozen=True, slots=True)
class TurnResult:
    """Outcome of a resolve-turn command."""

    ok: bool
    log: Tuple[GameMessage, ...] = field(default_factory=tuple)
    combat_complete: bool = False


def format_lock_position(position: float) -> str:
    return f"{int(position * 100)}%"


class BattleService:
    """Runs combat turns against the active enemy encounter."""

    def __init__(self, encounter_service: EncounterService) -> None:
        self._encounter_service = encounter_service

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    def begin_combat(self, state: RunState, encounter: EnemyEncounter) -> None:
        state.encounter = encounter
        state.phase = "combat"
        state.last_lock_position = None
        state.action_bar = build_action_bar(state.party, state.relics, state.rng)
        state.add_message("Combat begins! Stop the action bar.", "info")
        logger.debug("Combat started against %s (%s)", encounter.name, encounter.encounter_type)

    def resolve_turn(self, state: RunState, manual_position: float | None = None) -> TurnResult:
        """
        Lock the bar, run every hero action in roster order, then let the enemy reply.

        Rejected commands leave the run untouched apart from the last turn log.
        """
        if state.phase != "combat":
            return self._reject(state, "You are not in combat right now.")
        encounter = state.encounter
        if state.action_bar is None or encounter is None:
            return self._reject(state, "The action bar is not ready.")
        if manual_position is not None and not math.isfinite(manual_position):
            return self._reject(state, "The lock position must be a number between 0% and 100%.")

        position = manual_position if manual_position is not None else state.rng.random()
        state.last_lock_position = position
        log: List[GameMessage] = [
            GameMessage.info(f"The bar stops at lock position {format_lock_position(position)}.")
        ]

        evaluation = state.action_bar.evaluate(position)
        if self._run_hero_phase(state, evaluation, encounter.enemy, log):
            log.append(GameMessage.success(f"{encounter.enemy.name} is defeated!"))
            self._commit_turn(state, log)
            self._grant_victory_rewards(state, encounter)
            logger.debug("Turn at %.3f won the fight", position)
            return TurnResult(ok=True, log=tuple(log), combat_complete=True)

        log.append(self._resolve_enemy_turn(state, encounter.enemy))

        if state.party_wiped():
            log.append(GameMessage.danger("The whole party has fallen. The expedition ends in failure."))
            state.phase = "game_over"
            self._commit_turn(state, log)
            logger.debug("Party wiped at level %d", state.level)
            return TurnResult(ok=True, log=tuple(log), combat_complete=False)

        self._commit_turn(state, log)
        self._prepare_next_turn(state)
        return TurnResult(ok=True, log=tuple(log), combat_complete=False)

    # -----------------------
    # Hero and Enemy Actions
    # -----------------------
    def resolve_hero_action(
        self, state: RunState, member: PartyMember, action: ActionType, enemy: Enemy
    ) -> GameMessage:
        if action == "attack":
            damage = self.attack_damage(state)
            enemy.take_damage(damage)
            return GameMessage.info(f"{member.name} attacks! {enemy.name} takes {damage} damage.")
        if action == "skill":
            heal = SKILL_BASE_HEAL + state.level // 2
            member.heal(heal)
            return GameMessage.info(f"{member.name} uses a skill and recovers {heal} HP.")
        if action == "rest":
            member.heal(REST_HEAL)
            return GameMessage.info(f"{member.name} rests and recovers {REST_HEAL} HP.")
        raise ValueError(f"Unknown action type: {action}")

    def attack_damage(self, state: RunState) -> int:
        damage = ATTACK_BASE_DAMAGE + state.level
        if has_attack_boost(state.relics):
            damage += ATTACK_BOOST_BONUS
        return damage

    def _run_hero_phase(
        self,
        state: RunState,
        evaluation: ActionEvaluation,
        enemy: Enemy,
        log: List[GameMessage],
    ) -> bool:
        # Downed members still act; the bar does not filter them out.
        for execution in evaluation.executions:
            for action in execution.actions:
                log.append(self.resolve_hero_action(state, execution.member, action, enemy))
                if not enemy.is_alive:
                    return True
        return False

    def _resolve_enemy_turn(self, state: RunState, enemy: Enemy) -> GameMessage:
        alive = [member for member in state.party if not member.is_down]
        if not alive:
            return GameMessage.danger(f"{enemy.name} roars. No one is left to answer.")
        target = state.rng.choice(alive)
        damage = enemy.base_attack + state.level
        target.take_damage(damage)
        return GameMessage.danger(
            f"{enemy.name} strikes back! {target.name} takes {damage} damage "
            f"({target.current_hp} HP left)."
        )

    # -----------------------
    # Helpers
    # -----------------------
    def _grant_victory_rewards(self, state: RunState, encounter: EnemyEncounter) -> None:
        is_elite = encounter.encounter_type == "elite"
        state.level += ELITE_LEVEL_GAIN if is_elite else NORMAL_LEVEL_GAIN
        state.add_message(f"Reached Level {state.level}!", "success")

        relic_chance = ELITE_RELIC_CHANCE if is_elite else NORMAL_RELIC_CHANCE
        if state.rng.random() < relic_chance:
            relic = roll_relic(state.rng)
            state.relics.append(relic)
            state.add_message(f"Obtained the relic '{relic.name}'!", "success")
            logger.debug("Relic granted: %s", relic.kind)

        state.phase = "selecting_encounter"
        state.encounter = None
        state.action_bar = None
        self._encounter_service.refresh_options(state)
        state.add_message("Choose your next path.", "info")

    def _prepare_next_turn(self, state: RunState) -> None:
        state.last_lock_position = None
        state.action_bar = build_action_bar(state.party, state.relics, state.rng)
        state.add_message("The next turn is ready.", "info")

    @staticmethod
    def _commit_turn(state: RunState, log: List[GameMessage]) -> None:
        state.messages.extend(log)
        state.last_turn_log = tuple(log)

    @staticmethod
    def _reject(state: RunState, reason: str) -> TurnResult:
        logger.warning("Turn rejected: %s", reason)
        log = (GameMessage.warn(reason),)
        state.last_turn_log = log
        return TurnResult(ok=False, log=log, combat_complete=False)
