"""Loadable resources: textures, sprites and flipbook animations."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

import pygame

from heroential.settings import DEFAULT_TRANSPARENT
from heroential.vector import Vec2Int


class TextureLoadError(Exception):
    """Raised when an image file cannot be loaded."""


class ResourceBase:
    """Base for resources; those without a file form ignore load and save."""

    def load_file(self, path) -> None:
        return None

    def save_file(self, path) -> None:
        return None


class Texture(ResourceBase):
    """A bitmap surface with a transparent colour key."""

    def __init__(self, surface: pygame.Surface | None = None, transparent=DEFAULT_TRANSPARENT):
        self.surface = surface
        self.size = Vec2Int(*surface.get_size()) if surface is not None else Vec2Int()
        self._transparent = tuple(transparent)
        self._apply_colorkey()

    @property
    def transparent(self) -> tuple:
        return self._transparent

    @transparent.setter
    def transparent(self, colour) -> None:
        self._transparent = tuple(colour)
        self._apply_colorkey()

    def _apply_colorkey(self) -> None:
        if self.surface is not None:
            self.surface.set_colorkey(self._transparent)

    def load_bmp(self, path) -> Texture:
        """Load the bitmap at ``path`` and return this texture."""
        try:
            surface = pygame.image.load(os.fspath(path))
        except (pygame.error, OSError) as exc:
            raise TextureLoadError(f"image load failed: {path}") from exc
        self.surface = surface
        self.size = Vec2Int(*surface.get_size())
        self._apply_colorkey()
        return self


@dataclass(eq=False)
class Sprite(ResourceBase):
    """A rectangular region of a texture."""

    texture: Texture
    x: int = 0
    y: int = 0
    cx: int = 0
    cy: int = 0

    def surface(self) -> pygame.Surface | None:
        return self.texture.surface

    def transparent(self) -> tuple:
        return self.texture.transparent

    @property
    def pos(self) -> Vec2Int:
        return Vec2Int(self.x, self.y)

    @property
    def size(self) -> Vec2Int:
        return Vec2Int(self.cx, self.cy)


@dataclass
class FlipbookInfo:
    """Where the frames of an animation lie in a texture and how they play."""

    texture: Texture | None = None
    name: str = ""
    size: Vec2Int = field(default_factory=Vec2Int)
    start: int = 0
    end: int = 0
    line: int = 0
    duration: float = 1.0
    loop: bool = True


@dataclass(eq=False)
class Flipbook(ResourceBase):
    """A named frame animation."""

    info: FlipbookInfo = field(default_factory=FlipbookInfo)