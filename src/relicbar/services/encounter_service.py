"""Encounter selection services: option generation and inline event/shop resolution."""
from __future__ import annotations

import logging

from relicbar.domain.encounters import generate_options
from relicbar.domain.relics import roll_relic
from relicbar.domain.state import RunState

logger = logging.getLogger(__name__)

EVENT_HEAL_AMOUNT = 6
EVENT_TRAP_DAMAGE = 5


class EncounterService:
    """Drives the path-selection side of a run."""

    def refresh_options(self, state: RunState) -> None:
        """Replace the current options with three fresh ones."""
        state.options = generate_options(state.rng, state.level)
        logger.debug("Generated options: %s", [option.encounter_type for option in state.options])

    def resolve_event(self, state: RunState) -> None:
        """Roll one of three altar outcomes, then return to path selection."""
        state.last_lock_position = None
        roll = state.rng.randint(0, 2)
        if roll == 0:
            target = state.rng.choice(state.party)
            target.heal(EVENT_HEAL_AMOUNT)
            state.add_message(
                f"Event: {target.name} rests by the altar and recovers {EVENT_HEAL_AMOUNT} HP.", "info"
            )
        elif roll == 1:
            relic = roll_relic(state.rng)
            state.relics.append(relic)
            state.add_message(f"Event: the altar bestows the relic '{relic.name}'.", "success")
        else:
            target = state.rng.choice(state.party)
            target.take_damage(EVENT_TRAP_DAMAGE)
            state.add_message(
                f"Event: a trap springs and {target.name} takes {EVENT_TRAP_DAMAGE} damage.", "warning"
            )
        logger.debug("Event resolved with roll %d", roll)
        state.phase = "selecting_encounter"
        self.refresh_options(state)

    def resolve_shop(self, state: RunState) -> None:
        """The merchant has nothing affordable yet; the visit is flavour only."""
        state.last_lock_position = None
        state.add_message("Shop: your purse is too light, so you only browse the wares.", "info")
        state.phase = "selecting_encounter"
        self.refresh_options(state)
