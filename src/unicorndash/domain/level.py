from __future__ import annotations

from dataclasses import replace

from unicorndash import config
from unicorndash.domain.game_state import WorldState


def obstacle_spawn_chance(level: int) -> float:
    # Per-tick probability; grows linearly with the level.
    return config.OBSTACLE_SPAWN_BASE + level * config.OBSTACLE_SPAWN_PER_LEVEL


def level_up(state: WorldState) -> WorldState:
    level = state.level + 1
    speed = state.obstacle_speed + 1
    if level % 3 == 0:
        speed += 1  # extra boost every third level
    return replace(
        state,
        level=level,
        time_left=config.LEVEL_DURATION,
        obstacle_speed=speed,
    )


def count_down(state: WorldState) -> WorldState:
    """One clock second. Runs out the level timer and levels up at zero."""
    if state.is_game_over:
        return state

    state = replace(state, time_left=state.time_left - 1)
    if state.time_left <= 0:
        return level_up(state)
    return state
