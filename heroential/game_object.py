"""Grid-aware animated objects with a state and a facing direction."""

from __future__ import annotations

from collections import Counter

from heroential.flipbook_actor import FlipbookActor
from heroential.settings import Dir, ObjectState
from heroential.vector import Vec2, Vec2Int

_ARRIVAL_DISTANCE = 5.0


class GameObject(FlipbookActor):
    """An actor on the cell grid, driven by its state each tick.

    The base state hooks count how many ticks were spent in each state and
    how often the animation was refreshed; subclasses replace them with
    their own behaviour.
    """

    def __init__(self, time_manager, scene_manager):
        super().__init__(time_manager, scene_manager)
        self.object_id = 0
        self.cell_pos = Vec2Int()
        self.speed = Vec2()
        self.dir = Dir.DOWN
        self.state = ObjectState.IDLE
        self.state_ticks: Counter = Counter()
        self.animation_updates = 0

    def begin_play(self) -> None:
        super().begin_play()
        self.set_state(ObjectState.MOVE)
        self.set_state(ObjectState.IDLE)

    def tick(self) -> None:
        super().tick()
        handlers = {
            ObjectState.IDLE: self.tick_idle,
            ObjectState.MOVE: self.tick_move,
            ObjectState.SKILL: self.tick_skill,
        }
        handlers[self.state]()

    def tick_idle(self) -> None:
        self.state_ticks[ObjectState.IDLE] += 1

    def tick_move(self) -> None:
        self.state_ticks[ObjectState.MOVE] += 1

    def tick_skill(self) -> None:
        self.state_ticks[ObjectState.SKILL] += 1

    def update_animation(self) -> None:
        self.animation_updates += 1

    def set_state(self, state: ObjectState) -> None:
        """Change state; the animation is refreshed only on an actual change."""
        if self.state == state:
            return
        self.state = state
        self.update_animation()

    def set_dir(self, direction: Dir) -> None:
        self.dir = direction
        self.update_animation()

    def has_reached_dest(self) -> bool:
        return (self.dest_pos - self.pos).length() < _ARRIVAL_DISTANCE

    def _grid_scene(self):
        scene = self._scene_manager.current_scene
        if scene is None or not hasattr(scene, "can_go") or not hasattr(scene, "convert_pos"):
            return None
        return scene

    def can_go(self, cell_pos: Vec2Int) -> bool:
        scene = self._grid_scene()
        if scene is None:
            return False
        return scene.can_go(cell_pos)

    def look_at_dir(self, cell_pos: Vec2Int) -> Dir:
        """The direction to face to look at ``cell_pos``; horizontal wins over vertical."""
        delta = cell_pos - self.cell_pos
        if delta.x > 0:
            return Dir.RIGHT
        if delta.x < 0:
            return Dir.LEFT
        if delta.y > 0:
            return Dir.DOWN
        return Dir.UP

    def set_cell_pos(self, cell_pos: Vec2Int, teleport: bool = False) -> None:
        """Move to a cell; the destination follows the scene's grid, and teleport jumps there."""
        self.cell_pos = cell_pos
        scene = self._grid_scene()
        if scene is None:
            return
        dest = scene.convert_pos(cell_pos)
        self.dest_pos = Vec2(dest.x, dest.y)
        if teleport:
            self.pos = Vec2(dest.x, dest.y)

    def front_cell_pos(self) -> Vec2Int:
        return self.cell_pos + Dir(self.dir).delta()