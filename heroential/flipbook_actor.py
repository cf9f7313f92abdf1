"""An actor that plays a flipbook animation."""

from __future__ import annotations

import pygame

from heroential.actor import Actor
from heroential.resources import Flipbook
from heroential.settings import WIN_SIZE_X, WIN_SIZE_Y


class FlipbookActor(Actor):
    """Advances through the frames of its flipbook and draws the current one."""

    def __init__(self, time_manager, scene_manager):
        super().__init__()
        self._time_manager = time_manager
        self._scene_manager = scene_manager
        self.flipbook: Flipbook | None = None
        self.sum_time = 0.0
        self.idx = 0
        self.scale = 1

    def tick(self) -> None:
        super().tick()
        if self.flipbook is None:
            return
        info = self.flipbook.info
        if not info.loop and self.idx == info.end:
            return

        self.sum_time += self._time_manager.delta_time
        frame_count = info.end - info.start + 1
        delta = info.duration / frame_count
        if self.sum_time >= delta:
            self.sum_time = 0.0
            self.idx = (self.idx + 1) % frame_count

    def render(self, surface) -> None:
        super().render(surface)
        if self.flipbook is None:
            return
        info = self.flipbook.info
        if info.texture is None or info.texture.surface is None:
            return
        source = info.texture.surface

        scaled = info.size * self.scale
        camera = self._scene_manager.camera_pos
        dest = (
            int(self.pos.x) - scaled.x // 2 - (int(camera.x) - WIN_SIZE_X // 2),
            int(self.pos.y) - scaled.y // 2 - (int(camera.y) - WIN_SIZE_Y // 2),
        )
        area = pygame.Rect(
            (info.start + self.idx) * info.size.x, info.line * info.size.y, info.size.x, info.size.y
        ).clip(source.get_rect())
        if area.width == 0 or area.height == 0 or scaled.x <= 0 or scaled.y <= 0:
            return
        frame = pygame.transform.scale(source.subsurface(area), (scaled.x, scaled.y))
        frame.set_colorkey(info.texture.transparent)
        surface.blit(frame, dest)

    def set_flipbook(self, flipbook: Flipbook | None) -> None:
        """Switch animation and restart it; setting the current one again does nothing."""
        if flipbook is not None and self.flipbook is flipbook:
            return
        self.flipbook = flipbook
        self.reset()

    def reset(self) -> None:
        self.sum_time = 0.0
        self.idx = 0

    def is_animation_ended(self) -> bool:
        if self.flipbook is None:
            return True
        info = self.flipbook.info
        return not info.loop and self.idx == info.end