from __future__ import annotations

from dataclasses import replace
from enum import Enum

from unicorndash.domain.events import GameEvent, TickResult
from unicorndash.domain.game_state import WorldState, reset_world


class Action(Enum):
    JUMP = "jump"
    SHIELD = "shield"
    RESTART = "restart"


def apply_action(state: WorldState, action: Action | None) -> TickResult:
    """Apply one player action. Actions that are not valid right now are ignored."""
    p = state.player

    if action is Action.RESTART:
        if state.is_game_over:
            return TickResult(reset_world(state))
        return TickResult(state)

    if state.is_game_over:
        return TickResult(state)

    if action is Action.JUMP and p.on_ground and not p.is_jumping:
        return TickResult(replace(state, player=replace(p, is_jumping=True)), (GameEvent.JUMPED,))

    if action is Action.SHIELD and not p.shield_active and p.shield_cooldown == 0:
        return TickResult(replace(state, player=replace(p, shield_active=True)))

    return TickResult(state)
