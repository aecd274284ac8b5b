from __future__ import annotations
import tkinter as tk
from collections.abc import Callable

from unicorndash.domain.controls import Action


KEY_BINDINGS: dict[str, Action] = {
    "Up": Action.JUMP,
    "space": Action.JUMP,
    "Down": Action.SHIELD,
    "s": Action.SHIELD,
    "S": Action.SHIELD,
    "r": Action.RESTART,
    "R": Action.RESTART,
}


def action_for_keysym(keysym: str) -> Action | None:
    return KEY_BINDINGS.get(keysym)


class TkInputMapper:
    def __init__(self, root: tk.Tk, on_action: Callable[[Action], None]) -> None:
        self._on_action = on_action
        root.bind("<KeyPress>", self._on_key_down)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_key_down(self, evt: tk.Event) -> None:
        action = action_for_keysym(evt.keysym)
        if action is None:
            return  # unmapped keys are dropped
        self._on_action(action)
