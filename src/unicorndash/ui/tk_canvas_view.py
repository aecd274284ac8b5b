from __future__ import annotations

import random
import tkinter as tk

from PIL import ImageTk

from unicorndash import config
from unicorndash.domain.game_state import PowerUpKind, WorldState
from unicorndash.infra.assets import AssetStore

SKY = "#adc6d1"
GROUND = "#f4c3ff"
SHIELD = "#d2bcf6"
TEXT = "blue"

_PLACEHOLDER_FILL = {
    "player": "#ffffff",
    "gold": "#f5c518",
    "purple": "#9b4dca",
    "obstacle": "#6e6e7a",
}


class TkCanvasView:
    def __init__(self, root: tk.Tk, assets: AssetStore, *, width: int, height: int) -> None:
        self._w = width
        self._h = height
        # Star twinkle only; never shared with the game rules.
        self._twinkle = random.Random()

        self.canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0)
        self.canvas.pack(fill="both", expand=True)

        # PhotoImage needs a live Tk root, so conversion happens here, once.
        self._images: dict[str, ImageTk.PhotoImage] = {}
        for key in ("player", "gold", "purple", "obstacle"):
            img = assets.image(key)
            if img is not None:
                self._images[key] = ImageTk.PhotoImage(img)

    def render_game(self, state: WorldState) -> None:
        c = self.canvas
        c.delete("all")

        c.create_rectangle(0, 0, self._w, self._h, outline="", fill=SKY)
        c.create_rectangle(0, self._h - config.GROUND_HEIGHT, self._w, self._h, outline="", fill=GROUND)

        for s in state.stars:
            shade = self._twinkle.randrange(100, 256)
            color = f"#{shade:02x}{shade:02x}{shade:02x}"
            c.create_oval(s.x, s.y, s.x + 5, s.y + 3, outline="", fill=color)

        for p in state.powerups:
            key = "gold" if p.kind is PowerUpKind.GOLD else "purple"
            self._draw_sprite(key, p.x, p.y, p.size, p.size, diamond=True)

        for o in state.obstacles:
            self._draw_sprite("obstacle", o.x, o.y, o.w, o.h)

        pl = state.player
        self._draw_sprite("player", pl.x, pl.y, config.PLAYER_WIDTH, config.PLAYER_HEIGHT)
        if pl.shield_active:
            # Tk has no alpha; a stipple reads as translucent.
            c.create_oval(
                pl.x - 15, pl.y - 15,
                pl.x + config.PLAYER_WIDTH + 15, pl.y + config.PLAYER_HEIGHT + 15,
                outline="", fill=SHIELD, stipple="gray25",
            )

        self._draw_hud(state)

        if state.is_game_over:
            self._draw_game_over(state)

    def _draw_sprite(self, key: str, x: int, y: int, w: int, h: int, *, diamond: bool = False) -> None:
        photo = self._images.get(key)
        if photo is not None:
            self.canvas.create_image(x, y, image=photo, anchor="nw")
            return

        fill = _PLACEHOLDER_FILL[key]
        if diamond:
            self.canvas.create_polygon(
                x + w / 2.0, y,
                x + w, y + h / 2.0,
                x + w / 2.0, y + h,
                x, y + h / 2.0,
                outline="", fill=fill,
            )
        elif key == "obstacle":
            self.canvas.create_oval(x, y, x + w, y + h, outline="", fill=fill)
        else:
            self.canvas.create_rectangle(x, y, x + w, y + h, outline="black", fill=fill)

    def _draw_hud(self, state: WorldState) -> None:
        c = self.canvas
        font = ("Arial", 14, "bold")

        # Health bar
        c.create_rectangle(20, 20, 220, 40, outline="", fill="blue")
        if state.health > 0:
            c.create_rectangle(20, 20, 20 + state.health * 2, 40, outline="", fill="pink")
        c.create_rectangle(20, 20, 220, 40, outline="black")

        c.create_text(20, 60, anchor="sw", text=f"Score: {state.score}", fill=TEXT, font=font)
        c.create_text(20, 90, anchor="sw", text=f"Level: {state.level}", fill=TEXT, font=font)
        c.create_text(self._w - 150, 30, anchor="sw", text=f"Time: {state.time_left}", fill=TEXT, font=font)

        on = state.player.shield_active
        c.create_text(
            self._w - 150, 60,
            anchor="sw",
            text=f"Shield: {'ON' if on else 'OFF'}",
            fill="cyan" if on else "gray",
            font=font,
        )

    def _draw_game_over(self, state: WorldState) -> None:
        c = self.canvas
        cx, cy = self._w / 2, self._h / 2

        c.create_rectangle(0, 0, self._w, self._h, outline="", fill=SKY)
        c.create_text(cx, cy - 50, anchor="s", text="GAME OVER", fill="white", font=("Arial", 36, "bold"))
        c.create_text(cx, cy, anchor="s", text=f"Final Score: {state.score}", fill="white", font=("Arial", 18))
        c.create_text(cx, cy + 30, anchor="s", text=f"Level Reached: {state.level}", fill="white", font=("Arial", 18))
        c.create_text(cx, cy + 70, anchor="s", text="Press R to restart", fill="white", font=("Arial", 18))
