"""Actors in a scene and the components attached to them."""

from __future__ import annotations

import weakref

from heroential.settings import WIN_SIZE_X, WIN_SIZE_Y, Layer
from heroential.vector import Vec2


class Component:
    """Behaviour attached to an actor; the owner is held weakly.

    The base class keeps track of its own lifecycle: whether play has
    begun and how many ticks and renders it has been given.
    """

    def __init__(self):
        self._owner: weakref.ref | None = None
        self.begun = False
        self.tick_count = 0
        self.render_count = 0

    @property
    def owner(self) -> Actor | None:
        return self._owner() if self._owner is not None else None

    @owner.setter
    def owner(self, actor: Actor | None) -> None:
        self._owner = weakref.ref(actor) if actor is not None else None

    def begin_play(self) -> None:
        self.begun = True

    def tick_component(self) -> None:
        self.tick_count += 1

    def render(self, surface) -> None:
        self.render_count += 1


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if high < value:
        return high
    return value


class CameraComponent(Component):
    """Keeps the camera on its owner, within the background's bounds."""

    def __init__(self, scene_manager):
        super().__init__()
        self._scene_manager = scene_manager
        self.bg_range = Vec2()

    def tick_component(self) -> None:
        super().tick_component()
        owner = self.owner
        if owner is None:
            return
        screen_x = WIN_SIZE_X // 2
        screen_y = WIN_SIZE_Y // 2
        pos = owner.pos
        self._scene_manager.camera_pos = Vec2(
            _clamp(pos.x, screen_x, self.bg_range.x - screen_x),
            _clamp(pos.y, screen_y, self.bg_range.y - screen_y),
        )


class Actor:
    """Something placed in a scene, with a position, a layer and components."""

    def __init__(self):
        self.pos = Vec2()
        self.dest_pos = Vec2()
        self.layer = Layer.OBJECT
        self.components: list[Component] = []

    def begin_play(self) -> None:
        for component in self.components:
            component.begin_play()

    def tick(self) -> None:
        for component in self.components:
            component.tick_component()

    def render(self, surface) -> None:
        for component in self.components:
            component.render(surface)

    def add_component(self, component: Component | None) -> None:
        if component is None:
            return
        component.owner = self
        self.components.append(component)

    def remove_component(self, component: Component) -> None:
        if component in self.components:
            self.components.remove(component)