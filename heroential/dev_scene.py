"""The development scene: a test map, the player and their resources."""

from __future__ import annotations

from typing import Callable, TypeVar

from heroential.actor import CameraComponent
from heroential.game_object import GameObject
from heroential.inputs import KeyType
from heroential.player import Player
from heroential.resources import FlipbookInfo
from heroential.scene import Scene
from heroential.settings import Layer
from heroential.sprite_actor import SpriteActor
from heroential.tilemap_actor import TilemapActor
from heroential.vector import Vec2, Vec2Int

T = TypeVar("T", bound=GameObject)

TILEMAP_KEY = "Tilemap_TEST_01"
TILEMAP_PATH = "Tilemap/Tilemap_TEST_01.txt"
MAP_SIZE = Vec2Int(52, 52)
TILE_SIZE = 16
TILE_SCALE = 3
BACKGROUND_RANGE = Vec2(832, 832)
SPAWN_SCALE = 4

_TEXTURES = (
    ("Coin", "Sprite/Item/coin_gold.bmp"),
    ("Stage-T01", "Sprite/Map/test-01.bmp"),
    ("Player_Blue", "Sprite/Player/Warrior_Blue.bmp"),
    ("Tile_CanMove", "Sprite/Map/Tile-CanMove.bmp"),
    ("Bullet_Blue", "Sprite/Effect/blue.bmp"),
)

# key, texture key, x, y, cx, cy (zero width or height means the texture's)
_SPRITES = (
    ("Coin", "Coin", 0, 0, 128, 16),
    ("Stage-T01", "Stage-T01", 0, 0, 0, 0),
    ("TileO", "Tile_CanMove", 0, 0, 16, 16),
    ("TileX", "Tile_CanMove", 16, 0, 32, 16),
)

# name, sheet line, duration, loop
_PLAYER_ANIMATIONS = (
    ("Player_IdleRight", 0, 0.6, True),
    ("Player_IdleLeft", 1, 0.6, True),
    ("Player_MoveRight", 2, 0.6, True),
    ("Player_MoveLeft", 3, 0.6, True),
    ("Player_AttackRight1", 4, 0.4, False),
    ("Player_AttackRight2", 5, 0.4, False),
    ("Player_AttackLeft1", 6, 0.4, False),
    ("Player_AttackLeft2", 7, 0.4, False),
    ("Player_AttackDown1", 8, 0.4, False),
    ("Player_AttackDown2", 9, 0.4, False),
    ("Player_AttackUp1", 10, 0.4, False),
    ("Player_AttackUp2", 11, 0.4, False),
)


class DevScene(Scene):
    """A scene on a tile grid, with a scrolling background and a player."""

    def __init__(self, time_manager, scene_manager, resource_manager, input_manager):
        super().__init__()
        self._time_manager = time_manager
        self._scene_manager = scene_manager
        self._resource_manager = resource_manager
        self._input_manager = input_manager
        self.tilemap_actor: TilemapActor | None = None

    def init(self) -> None:
        self.load_resources()
        self.load_map()
        self.load_player()
        self.load_tilemap()
        self.load_effect()

        player = Player(self._time_manager, self._scene_manager, self._resource_manager, self._input_manager)
        player.set_cell_pos(Vec2Int(400, 400), True)
        self.add_actor(player)

        camera = CameraComponent(self._scene_manager)
        camera.bg_range = Vec2(BACKGROUND_RANGE.x, BACKGROUND_RANGE.y)
        player.add_component(camera)

        player.begin_play()

        super().init()

    def update(self) -> None:
        super().update()
        if self._input_manager.button_down(KeyType.F):
            (self._resource_manager.resource_path / "Tilemap").mkdir(parents=True, exist_ok=True)
            self._resource_manager.save_tilemap(TILEMAP_KEY, TILEMAP_PATH)
        if self._input_manager.button_down(KeyType.G):
            self._reload_tilemap()

    def _reload_tilemap(self) -> None:
        # A missing map file leaves the tilemap as it is.
        try:
            self._resource_manager.load_tilemap(TILEMAP_KEY, TILEMAP_PATH)
        except FileNotFoundError:
            pass

    def load_resources(self) -> None:
        """Load the scene's textures and cut its sprites."""
        rm = self._resource_manager
        for key, path in _TEXTURES:
            rm.load_texture(key, path)
        for key, texture_key, x, y, cx, cy in _SPRITES:
            rm.create_sprite(key, rm.texture(texture_key), x, y, cx, cy)

    def load_map(self) -> None:
        sprite = self._resource_manager.sprite("Stage-T01")
        background = SpriteActor(self._scene_manager)
        background.sprite = sprite
        background.layer = Layer.BACKGROUND
        size = sprite.size
        background.pos = Vec2(float(size.x // 2), float(size.y // 2))
        self.add_actor(background)

    def load_tilemap(self) -> None:
        actor = TilemapActor(self._scene_manager, self._resource_manager, self._input_manager)
        self.add_actor(actor)
        self.tilemap_actor = actor

        tilemap = self._resource_manager.create_tilemap(TILEMAP_KEY)
        tilemap.set_map_size(MAP_SIZE)
        tilemap.tile_size = TILE_SIZE
        tilemap.scale = TILE_SCALE

        self._reload_tilemap()

        actor.tilemap = tilemap
        actor.show_debug = False

    def load_player(self) -> None:
        texture = self._resource_manager.texture("Player_Blue")
        for name, line, duration, loop in _PLAYER_ANIMATIONS:
            flipbook = self._resource_manager.create_flipbook(name)
            flipbook.info = FlipbookInfo(texture, name, Vec2Int(192, 192), 0, 5, line, duration, loop)

    def load_effect(self) -> None:
        texture = self._resource_manager.texture("Bullet_Blue")
        flipbook = self._resource_manager.create_flipbook("SonicWave_Blue")
        flipbook.info = FlipbookInfo(texture, "SonicWave_Blue", Vec2Int(32, 32), 6, 9, 0, 0.4)

    def can_go(self, cell_pos: Vec2Int) -> bool:
        """Whether the cell exists on the map and is not blocked."""
        if self.tilemap_actor is None or self.tilemap_actor.tilemap is None:
            return False
        try:
            tile = self.tilemap_actor.tilemap.tile_at(cell_pos)
        except IndexError:
            return False
        return tile.value != 1

    def convert_pos(self, cell_pos: Vec2Int) -> Vec2:
        """World position of the centre of a cell; the origin when there is no map."""
        if self.tilemap_actor is None or self.tilemap_actor.tilemap is None:
            return Vec2()
        tilemap = self.tilemap_actor.tilemap
        size = tilemap.tile_size * tilemap.scale
        pos = self.tilemap_actor.pos
        return Vec2(
            pos.x + cell_pos.x * size + size // 2,
            pos.y + cell_pos.y * size + size // 2,
        )

    def spawn_object(self, factory: Callable[[], T], cell_pos: Vec2Int) -> T:
        """Build a game object, place it on ``cell_pos``, add it and start it."""
        obj = factory()
        if not isinstance(obj, GameObject):
            raise TypeError(f"spawned object must be a GameObject, got {type(obj).__name__}")
        obj.set_cell_pos(cell_pos, True)
        obj.scale = SPAWN_SCALE
        self.add_actor(obj)
        obj.begin_play()
        return obj