from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from unicorndash import config
from unicorndash.infra.exceptions import AssetLoadError
from unicorndash.infra.sounds import SoundBank

logger = logging.getLogger(__name__)

# key -> (file name, drawn size)
IMAGE_FILES: dict[str, tuple[str, tuple[int, int]]] = {
    "player": (config.PLAYER_IMAGE, (config.PLAYER_WIDTH, config.PLAYER_HEIGHT)),
    "gold": (config.GOLD_IMAGE, (config.POWERUP_SIZE, config.POWERUP_SIZE)),
    "purple": (config.PURPLE_IMAGE, (config.POWERUP_SIZE, config.POWERUP_SIZE)),
    "obstacle": (config.OBSTACLE_IMAGE, (config.OBSTACLE_WIDTH, config.OBSTACLE_HEIGHT)),
}

SOUND_FILES: dict[str, str] = {
    "jump": config.JUMP_SOUND,
    "collect": config.COLLECT_SOUND,
    "death": config.DEATH_SOUND,
}


def load_image(key: str, path: Path, size: tuple[int, int]) -> Image.Image:
    try:
        with Image.open(path) as img:
            return img.convert("RGBA").resize(size, Image.LANCZOS)
    except FileNotFoundError as e:
        raise AssetLoadError(key, path, "file not found") from e
    except (OSError, UnidentifiedImageError) as e:
        raise AssetLoadError(key, path, str(e)) from e


class AssetStore:
    """
    Loads the game's fixed images and sounds once, at startup.

    With strict=False a missing or broken file is logged and its slot stays
    empty: images fall back to placeholder shapes, sounds to silence.
    With strict=True the first failure raises AssetLoadError.
    """

    def __init__(
        self,
        *,
        base_dir: Path | None = None,
        strict: bool = False,
        sounds: SoundBank | None = None,
    ) -> None:
        self._base_dir = base_dir or Path.cwd()
        self._strict = strict
        self.sounds = sounds or SoundBank()
        self._images: dict[str, Image.Image | None] = {}

    def load(self) -> None:
        for key, (filename, size) in IMAGE_FILES.items():
            path = self._base_dir / filename
            try:
                self._images[key] = load_image(key, path, size)
            except AssetLoadError as e:
                if self._strict:
                    raise
                logger.warning("%s; drawing a placeholder instead", e)
                self._images[key] = None

        for key, filename in SOUND_FILES.items():
            path = self._base_dir / filename
            if self._strict:
                self.sounds.load(key, path)
            else:
                self.sounds.load_optional(key, path)

    def image(self, key: str) -> Image.Image | None:
        return self._images.get(key)

    def missing(self) -> list[str]:
        missing = [k for k, img in self._images.items() if img is None]
        missing += [k for k in SOUND_FILES if not self.sounds.is_loaded(k)]
        return missing

    def play(self, key: str) -> None:
        self.sounds.play(key)
