"""Keyed store of textures, sprites, flipbooks and tilemaps."""

from __future__ import annotations

import re
from pathlib import Path

from heroential.resources import Flipbook, Sprite, Texture
from heroential.settings import DEFAULT_TRANSPARENT
from heroential.tilemap import Tilemap


class ResourceManager:
    """Loads resources relative to a root directory and caches them by key."""

    def __init__(self):
        self.resource_path = Path()
        self._textures: dict[str, Texture] = {}
        self._sprites: dict[str, Sprite] = {}
        self._flipbooks: dict[str, Flipbook] = {}
        self._tilemaps: dict[str, Tilemap] = {}

    def init(self, resource_path) -> None:
        self.resource_path = Path(resource_path)

    def _full_path(self, path) -> Path:
        parts = [part for part in re.split(r"[\\/]", str(path)) if part]
        return self.resource_path.joinpath(*parts)

    def texture(self, key: str) -> Texture | None:
        return self._textures.get(key)

    def load_texture(self, key: str, path, transparent=DEFAULT_TRANSPARENT) -> Texture:
        """Load a bitmap under ``key``; a key already loaded returns its texture."""
        if key in self._textures:
            return self._textures[key]
        texture = Texture().load_bmp(self._full_path(path))
        texture.transparent = transparent
        self._textures[key] = texture
        return texture

    def sprite(self, key: str) -> Sprite | None:
        return self._sprites.get(key)

    def create_sprite(self, key: str, texture: Texture, x: int = 0, y: int = 0, cx: int = 0, cy: int = 0) -> Sprite:
        """Cut a sprite from ``texture``; a zero width or height means the texture's."""
        if key in self._sprites:
            return self._sprites[key]
        if cx == 0:
            cx = texture.size.x
        if cy == 0:
            cy = texture.size.y
        sprite = Sprite(texture, x, y, cx, cy)
        self._sprites[key] = sprite
        return sprite

    def flipbook(self, key: str) -> Flipbook | None:
        return self._flipbooks.get(key)

    def create_flipbook(self, key: str) -> Flipbook:
        return self._flipbooks.setdefault(key, Flipbook())

    def tilemap(self, key: str) -> Tilemap | None:
        return self._tilemaps.get(key)

    def create_tilemap(self, key: str) -> Tilemap:
        return self._tilemaps.setdefault(key, Tilemap())

    def save_tilemap(self, key: str, path) -> None:
        tilemap = self._tilemaps.get(key)
        if tilemap is None:
            raise KeyError(f"no tilemap named {key!r}")
        tilemap.save_file(self._full_path(path))

    def load_tilemap(self, key: str, path) -> Tilemap:
        """Load a tilemap file into the tilemap under ``key``, creating it if needed."""
        tilemap = self._tilemaps.setdefault(key, Tilemap())
        tilemap.load_file(self._full_path(path))
        return tilemap