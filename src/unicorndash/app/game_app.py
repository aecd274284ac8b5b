from __future__ import annotations

import random
import tkinter as tk

from unicorndash import config
from unicorndash.app.game_runner import GameRunner
from unicorndash.infra.assets import AssetStore
from unicorndash.ui.input_mapper import TkInputMapper
from unicorndash.ui.tk_canvas_view import TkCanvasView


class GameApp:
    def __init__(
        self,
        assets: AssetStore,
        *,
        rng: random.Random | None = None,
        root: tk.Tk | None = None,
    ) -> None:
        self.root = root or tk.Tk()
        self.root.title(config.TITLE)
        self.root.resizable(False, False)

        self.assets = assets
        self.view = TkCanvasView(self.root, assets, width=config.WIDTH, height=config.HEIGHT)
        self.runner = GameRunner(
            self.root,
            rng or random.Random(),
            render_fn=self._render,
            play_fn=assets.play,
        )
        self.input = TkInputMapper(self.root, self.runner.handle)
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def run(self) -> None:
        self.runner.start()
        self.root.mainloop()

    def _render(self) -> None:
        self.view.render_game(self.runner.controller.state)

    def _on_close(self) -> None:
        if self.runner.running:
            self.runner.stop()
        self.root.destroy()
