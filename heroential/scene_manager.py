"""Holds the current scene and the camera position."""

from __future__ import annotations

from typing import Callable, Mapping, Protocol

from heroential.settings import WIN_SIZE_X, WIN_SIZE_Y, SceneType
from heroential.vector import Vec2


class SceneLike(Protocol):
    def init(self) -> None: ...

    def update(self) -> None: ...

    def render(self, surface) -> None: ...


SceneFactory = Callable[[], SceneLike]


class SceneManager:
    """Switches between scenes built by registered factories."""

    def __init__(self, factories: Mapping[SceneType, SceneFactory] | None = None):
        self._factories: dict[SceneType, SceneFactory] = dict(factories or {})
        self._scene: SceneLike | None = None
        self.scene_type = SceneType.NONE
        self.camera_pos = Vec2(WIN_SIZE_X / 2, WIN_SIZE_Y / 2)

    @property
    def current_scene(self) -> SceneLike | None:
        return self._scene

    def register(self, scene_type: SceneType, factory: SceneFactory) -> None:
        """Make ``factory`` the builder for scenes of ``scene_type``."""
        self._factories[scene_type] = factory

    def update(self) -> None:
        if self._scene is not None:
            self._scene.update()

    def render(self, surface) -> None:
        if self._scene is not None:
            self._scene.render(surface)

    def clear(self) -> None:
        self._scene = None

    def change_scene(self, scene_type: SceneType) -> None:
        """Replace the current scene with a new one of ``scene_type`` and initialise it."""
        if self.scene_type == scene_type:
            return
        try:
            factory = self._factories[scene_type]
        except KeyError:
            raise KeyError(f"no scene registered for {scene_type}") from None

        self._scene = None
        self._scene = factory()
        self.scene_type = scene_type
        self._scene.init()