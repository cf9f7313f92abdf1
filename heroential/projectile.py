"""Projectiles, including the sword's sonic wave."""

from __future__ import annotations

from heroential.game_object import GameObject
from heroential.resources import Flipbook
from heroential.vector import Vec2

_SONIC_WAVE_SPEED = 250.0
_SONIC_WAVE_LIFETIME = 5.0


class Projectile(GameObject):
    """A game object fired by another."""


class SonicWave(Projectile):
    """A wave that flies in a straight line and leaves the scene after a few seconds."""

    def __init__(self, time_manager, scene_manager, resource_manager):
        super().__init__(time_manager, scene_manager)
        self.flipbook_idle: Flipbook | None = resource_manager.flipbook("SonicWave_Blue")
        self.life_time = 0.0
        self.direction_vector = Vec2()

    def begin_play(self) -> None:
        super().begin_play()
        self.update_animation()

    def tick(self) -> None:
        super().tick()
        delta_time = self._time_manager.delta_time
        self.pos.y += _SONIC_WAVE_SPEED * self.direction_vector.y * delta_time
        self.pos.x += _SONIC_WAVE_SPEED * self.direction_vector.x * delta_time
        self.life_time += delta_time

        if self.life_time <= _SONIC_WAVE_LIFETIME:
            return
        scene = self._scene_manager.current_scene
        if scene is None:
            return
        scene.remove_actor(self)

    def update_animation(self) -> None:
        self.set_flipbook(self.flipbook_idle)

    def set_direction_vector(self, start, end) -> None:
        """Aim from ``start`` towards ``end`` with a unit vector."""
        direction = Vec2(float(end.x), float(end.y)) - Vec2(float(start.x), float(start.y))
        direction.normalize()
        self.direction_vector = direction