from __future__ import annotations

import logging
import time
import tkinter as tk
from collections.abc import Callable

logger = logging.getLogger(__name__)


class GameLoop:
    """Periodic callback on the Tk event loop. Callbacks never overlap."""

    def __init__(
        self,
        *,
        root: tk.Misc,
        update_fn: Callable[[float], None],
        render_fn: Callable[[], None] | None = None,
        interval_ms: int = 16,
        max_dt: float = 0.1,
    ) -> None:
        self._root = root
        self._update_fn = update_fn
        self._render_fn = render_fn
        self._interval_ms = max(1, interval_ms)
        self._max_dt = max_dt

        self._running = False
        self._after_id: str | None = None
        self._last_t = 0.0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._last_t = time.monotonic()
        self._schedule_next()

    def stop(self) -> None:
        self._running = False
        if self._after_id is not None:
            try:
                self._root.after_cancel(self._after_id)
            except tk.TclError:
                # Root may already be destroyed; ignore during shutdown.
                pass
            finally:
                self._after_id = None

    def _schedule_next(self) -> None:
        self._after_id = self._root.after(self._interval_ms, self._tick)

    def _tick(self) -> None:
        self._after_id = None
        if not self._running:
            return

        now = time.monotonic()
        dt = now - self._last_t
        self._last_t = now

        # Clamp to avoid huge dt after pauses/minimize.
        if dt > self._max_dt:
            dt = self._max_dt

        try:
            self._update_fn(dt)
            if self._render_fn is not None:
                self._render_fn()
        except Exception:
            # Fail fast rather than keep ticking on a corrupt state.
            logger.exception("Game loop callback failed; stopping loop")
            self.stop()
            raise

        # The update may have stopped us (game over).
        if self._running:
            self._schedule_next()
