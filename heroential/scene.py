"""A scene: actors grouped by render layer."""

from __future__ import annotations

from heroential.actor import Actor
from heroential.creature import Creature
from heroential.settings import Layer
from heroential.vector import Vec2Int


class Scene:
    """Holds actors per layer and drives them in layer order."""

    def __init__(self):
        self._actors: dict[Layer, list[Actor]] = {layer: [] for layer in Layer}

    def _snapshot(self) -> list[Actor]:
        # Actors may add or remove actors while being driven.
        return [actor for layer in Layer for actor in list(self._actors[layer])]

    def init(self) -> None:
        for actor in self._snapshot():
            actor.begin_play()

    def update(self) -> None:
        for actor in self._snapshot():
            actor.tick()

    def render(self, surface) -> None:
        for actor in self._snapshot():
            actor.render(surface)

    def add_actor(self, actor: Actor | None) -> None:
        if actor is None:
            return
        self._actors[Layer(actor.layer)].append(actor)

    def remove_actor(self, actor: Actor | None) -> None:
        """Remove every occurrence of ``actor`` from its layer."""
        if actor is None:
            return
        layer = self._actors[Layer(actor.layer)]
        layer[:] = [other for other in layer if other is not actor]

    def actors(self, layer: Layer) -> list[Actor]:
        """A copy of the actors on ``layer``, in the order they were added."""
        return list(self._actors[Layer(layer)])

    def creature_at(self, cell_pos: Vec2Int) -> Creature | None:
        """The first creature on the object layer standing on ``cell_pos``."""
        for actor in self._actors[Layer.OBJECT]:
            if isinstance(actor, Creature) and actor.cell_pos == cell_pos:
                return actor
        return None