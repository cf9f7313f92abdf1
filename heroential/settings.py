"""Window dimensions, shared constants and game-wide enumerations."""

from __future__ import annotations

from enum import Enum, IntEnum

from heroential.vector import Vec2Int

WIN_SIZE_X = 800
WIN_SIZE_Y = 600

MINIMAP_SIZE_X = 200
MINIMAP_SIZE_Y = 128

PI = 3.1415926

DEFAULT_TRANSPARENT = (255, 174, 201)


class SceneType(Enum):
    NONE = 0
    DEV_SCENE = 1
    EDIT_SCENE = 2
    BASIC_SCENE = 3


class Layer(IntEnum):
    """Render layers, drawn in ascending order."""

    BACKGROUND = 0
    OBJECT = 1
    EFFECT = 2
    UI = 3


LAYER_COUNT = len(Layer)


class ColliderType(Enum):
    BOX = 0
    SPHERE = 1


class CollisionLayer(IntEnum):
    OBJECT = 0
    GROUND = 1
    WALL = 2


class Dir(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    def delta(self) -> Vec2Int:
        """The one-cell step in this direction."""
        return _DIR_DELTAS[self]


_DIR_DELTAS = {
    Dir.UP: Vec2Int(0, -1),
    Dir.DOWN: Vec2Int(0, 1),
    Dir.LEFT: Vec2Int(-1, 0),
    Dir.RIGHT: Vec2Int(1, 0),
}


class ObjectState(Enum):
    IDLE = 0
    MOVE = 1
    SKILL = 2


class WeaponType(Enum):
    SWORD = 0
    BOW = 1
    STAFF = 2