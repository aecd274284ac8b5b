"""Sound loading and playback on top of pygame.mixer.

Sounds are registered under a short key ("jump", "collect", ...) so the rest
of the game never handles paths or Sound objects:

    bank = SoundBank()
    bank.load_optional("jump", Path("Jump_sound.wav"))
    bank.play("jump")

The mixer is initialised lazily on first load. If it cannot start (no audio
device, headless CI) the failure is logged once and every call becomes a
no-op.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from unicorndash.infra.exceptions import AssetLoadError

logger = logging.getLogger(__name__)


class SoundBank:
    def __init__(self) -> None:
        self._inited = False
        self._failed_init = False
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self._missing_warned: set[str] = set()

    def ensure_init(self) -> bool:
        """Initialise pygame.mixer if needed. Returns True on success.

        Safe to call multiple times.
        """
        if self._inited:
            return True
        if self._failed_init:
            return False
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=512)
            self._inited = pygame.mixer.get_init() is not None
            return self._inited
        except pygame.error as e:  # pragma: no cover - environment dependent
            logger.warning("Audio disabled, mixer init failed: %s", e)
            self._failed_init = True
            return False

    def is_available(self) -> bool:
        return self._inited and pygame.mixer.get_init() is not None

    def load(self, key: str, path: Path) -> pygame.mixer.Sound | None:
        """Load a sound file and register it under `key`.

        Raises AssetLoadError if the file is missing or cannot be decoded.
        Returns None when audio is unavailable altogether.
        """
        if not path.is_file():
            raise AssetLoadError(key, path, "file not found")
        if not self.ensure_init():
            return None
        try:
            snd = pygame.mixer.Sound(str(path))
        except pygame.error as e:
            raise AssetLoadError(key, path, str(e)) from e
        self._sounds[key] = snd
        logger.debug("Loaded sound '%s' from %s", key, path)
        return snd

    def load_optional(self, key: str, path: Path) -> pygame.mixer.Sound | None:
        """Like `load`, but logs and returns None instead of raising."""
        try:
            return self.load(key, path)
        except AssetLoadError as e:
            logger.warning("%s; cue will be silent", e)
            return None

    def is_loaded(self, key: str) -> bool:
        return key in self._sounds

    def play(self, key: str) -> pygame.mixer.Channel | None:
        if not self.is_available():
            return None
        snd = self._sounds.get(key)
        if snd is None:
            # Warn once per key to avoid spam.
            if key not in self._missing_warned:
                logger.warning("Sound '%s' not loaded", key)
                self._missing_warned.add(key)
            return None
        # Restart from the beginning even if the cue is still playing.
        snd.stop()
        return snd.play()
