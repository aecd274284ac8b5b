from __future__ import annotations

import logging
from collections.abc import Callable

from unicorndash.domain.controls import Action, apply_action
from unicorndash.domain.events import GameEvent, TickResult
from unicorndash.domain.game_state import WorldState, new_world
from unicorndash.domain.level import count_down
from unicorndash.domain.rng import RandomSource
from unicorndash.domain.world import World

logger = logging.getLogger(__name__)


class GameController:
    """
    Owns the session's WorldState and feeds it the three inputs:
    physics ticks, clock seconds and player actions.
    """

    def __init__(
        self,
        rng: RandomSource,
        *,
        world: World | None = None,
        on_event: Callable[[GameEvent], None] | None = None,
    ) -> None:
        self.rng = rng
        self.world = world or World()
        self.state: WorldState = new_world(rng)
        self._on_event = on_event

    def tick(self) -> None:
        self._commit(self.world.tick(self.state, self.rng))

    def clock(self) -> None:
        level = self.state.level
        self.state = count_down(self.state)
        if self.state.level != level:
            logger.info("Level up: %d (speed %d)", self.state.level, self.state.obstacle_speed)

    def handle(self, action: Action) -> None:
        was_over = self.state.is_game_over
        self._commit(apply_action(self.state, action))
        if was_over and not self.state.is_game_over:
            logger.info("Restarted")

    def _commit(self, result: TickResult) -> None:
        self.state = result.state
        for event in result.events:
            if event is GameEvent.DIED:
                logger.info("Game over: score=%d level=%d", self.state.score, self.state.level)
            if self._on_event is not None:
                self._on_event(event)
