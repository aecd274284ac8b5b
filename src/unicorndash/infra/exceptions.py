from __future__ import annotations

from pathlib import Path


class AssetError(Exception):
    """Base class for asset store failures."""


class AssetLoadError(AssetError):
    """An image or sound file is missing or could not be decoded."""

    def __init__(self, key: str, path: Path, reason: str) -> None:
        super().__init__(f"Failed to load asset '{key}' from {path}: {reason}")
        self.key = key
        self.path = path
