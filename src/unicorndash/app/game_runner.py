from __future__ import annotations

import tkinter as tk
from collections.abc import Callable

from unicorndash import config
from unicorndash.app.game_controller import GameController
from unicorndash.app.game_loop import GameLoop
from unicorndash.domain.controls import Action
from unicorndash.domain.events import GameEvent
from unicorndash.domain.rng import RandomSource


class GameRunner:
    """
    Drives a GameController from two clocks on one Tk root:
    fixed-step physics (rendering after each update) and the level countdown.
    Both clocks stop on death and resume on restart.
    """

    def __init__(
        self,
        root: tk.Misc,
        rng: RandomSource,
        *,
        render_fn: Callable[[], None],
        play_fn: Callable[[str], None],
    ) -> None:
        self._play_fn = play_fn
        self.controller = GameController(rng, on_event=self._on_event)

        self._fixed_dt = 1.0 / config.TICK_RATE
        self._accum = 0.0

        self.loop = GameLoop(
            root=root,
            update_fn=self.update,
            render_fn=render_fn,
            interval_ms=1000 // config.TICK_RATE,
        )
        self.clock = GameLoop(
            root=root,
            update_fn=self._on_clock,
            interval_ms=config.CLOCK_INTERVAL_MS,
            max_dt=config.CLOCK_INTERVAL_MS / 1000.0 * 2,
        )

    @property
    def running(self) -> bool:
        return self.loop.running or self.clock.running

    def start(self) -> None:
        self._accum = 0.0
        self.loop.start()
        self.clock.start()

    def stop(self) -> None:
        self.loop.stop()
        self.clock.stop()

    def update(self, dt: float) -> None:
        self._accum += dt

        steps = 0
        while self._accum >= self._fixed_dt and steps < config.MAX_CATCH_UP_STEPS:
            self.controller.tick()
            self._accum -= self._fixed_dt
            steps += 1
            if self.controller.state.is_game_over:
                break

        if steps == config.MAX_CATCH_UP_STEPS:
            # Drop the backlog instead of spiralling.
            self._accum = 0.0

    def handle(self, action: Action) -> None:
        was_over = self.controller.state.is_game_over
        self.controller.handle(action)
        if was_over and not self.controller.state.is_game_over:
            self.start()

    def _on_clock(self, _dt: float) -> None:
        self.controller.clock()

    def _on_event(self, event: GameEvent) -> None:
        self._play_fn(event.value)
        if event is GameEvent.DIED:
            self.stop()
