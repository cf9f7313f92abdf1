"""An actor drawn as a single sprite."""

from __future__ import annotations

import pygame

from heroential.actor import Actor
from heroential.resources import Sprite
from heroential.settings import WIN_SIZE_X, WIN_SIZE_Y
from heroential.vector import Vec2Int


class SpriteActor(Actor):
    """Draws its sprite centred on its position, relative to the camera."""

    def __init__(self, scene_manager):
        super().__init__()
        self._scene_manager = scene_manager
        self.sprite: Sprite | None = None

    def screen_position(self) -> Vec2Int:
        """Top-left corner of the sprite on screen; the origin when there is no sprite."""
        if self.sprite is None:
            return Vec2Int()
        size = self.sprite.size
        camera = self._scene_manager.camera_pos
        return Vec2Int(
            int(self.pos.x) - size.x // 2 - (int(camera.x) - WIN_SIZE_X // 2),
            int(self.pos.y) - size.y // 2 - (int(camera.y) - WIN_SIZE_Y // 2),
        )

    def render(self, surface) -> None:
        super().render(surface)
        if self.sprite is None:
            return
        source = self.sprite.surface()
        if source is None:
            return
        area = pygame.Rect(self.sprite.x, self.sprite.y, self.sprite.cx, self.sprite.cy)
        surface.blit(source, tuple(self.screen_position()), area)