from types import SimpleNamespace

import pygame
import pytest

from heroential.actor import Actor, CameraComponent
from heroential.dev_scene import DevScene
from heroential.game_object import GameObject
from heroential.inputs import InputManager, KeyType
from heroential.player import Player
from heroential.resource_manager import ResourceManager
from heroential.scene_manager import SceneManager
from heroential.settings import Layer, SceneType
from heroential.sprite_actor import SpriteActor
from heroential.tilemap import Tilemap
from heroential.timing import TimeManager
from heroential.vector import Vec2, Vec2Int

BITMAPS = {
    "Sprite/Item/coin_gold.bmp": (128, 16),
    "Sprite/Map/test-01.bmp": (64, 64),
    "Sprite/Player/Warrior_Blue.bmp": (64, 64),
    "Sprite/Map/Tile-CanMove.bmp": (32, 16),
    "Sprite/Effect/blue.bmp": (64, 32),
}


def map_text(blocked=()):
    rows = []
    for y in range(52):
        rows.append("".join("1" if (x, y) in blocked else "0" for x in range(52)))
    return "52\n52\n" + "\n".join(rows) + "\n"


def build_resources(root, tilemap_text=None, skip=()):
    for rel, size in BITMAPS.items():
        if rel in skip:
            continue
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        surface = pygame.Surface(size)
        surface.fill((10, 20, 30))
        pygame.image.save(surface, str(path))
    if tilemap_text is not None:
        (root / "Tilemap").mkdir(exist_ok=True)
        (root / "Tilemap" / "Tilemap_TEST_01.txt").write_text(tilemap_text, encoding="utf-8")


def managers(root):
    tm = TimeManager(clock=lambda: 0.0)
    sm = SceneManager()
    rm = ResourceManager()
    im = InputManager()
    rm.init(root)
    sm.register(SceneType.DEV_SCENE, lambda: DevScene(tm, sm, rm, im))
    return SimpleNamespace(tm=tm, sm=sm, rm=rm, im=im)


def start(root):
    world = managers(root)
    world.sm.change_scene(SceneType.DEV_SCENE)
    world.scene = world.sm.current_scene
    return world


@pytest.fixture
def world(tmp_path):
    build_resources(tmp_path, map_text(blocked={(7, 3)}))
    return start(tmp_path)


def players(scene):
    return [a for a in scene.actors(Layer.OBJECT) if isinstance(a, Player)]


def test_init_builds_background(world):
    assert isinstance(world.scene, DevScene)
    backgrounds = world.scene.actors(Layer.BACKGROUND)
    assert len(backgrounds) == 1
    background = backgrounds[0]
    assert isinstance(background, SpriteActor)
    assert background.sprite is world.rm.sprite("Stage-T01")
    assert background.sprite.size == Vec2Int(64, 64)
    assert background.pos == Vec2(32.0, 32.0)


def test_init_cuts_sprites(world):
    assert world.rm.sprite("TileO").size == Vec2Int(16, 16)
    assert world.rm.sprite("TileX").pos == Vec2Int(16, 0)
    assert world.rm.sprite("Coin").texture is world.rm.texture("Coin")


def test_init_places_player_with_camera(world):
    found = players(world.scene)
    assert len(found) == 1
    player = found[0]
    assert player.cell_pos == Vec2Int(5, 5)
    assert player.pos == world.scene.convert_pos(Vec2Int(5, 5))
    cameras = [c for c in player.components if isinstance(c, CameraComponent)]
    assert len(cameras) == 1
    assert cameras[0].bg_range == Vec2(832, 832)
    assert cameras[0].owner is player


def test_player_flipbooks_follow_sheet(world):
    attack = world.rm.flipbook("Player_AttackUp2").info
    assert attack.line == 11
    assert attack.loop is False
    assert attack.size == Vec2Int(192, 192)
    assert attack.texture is world.rm.texture("Player_Blue")
    idle = world.rm.flipbook("Player_IdleRight").info
    assert idle.line == 0
    assert idle.loop is True
    assert idle.name == "Player_IdleRight"


def test_effect_flipbook(world):
    info = world.rm.flipbook("SonicWave_Blue").info
    assert (info.start, info.end, info.line) == (6, 9, 0)
    assert info.size == Vec2Int(32, 32)
    assert info.texture is world.rm.texture("Bullet_Blue")


def test_tilemap_loaded_from_file(world):
    tilemap = world.scene.tilemap_actor.tilemap
    assert tilemap is world.rm.tilemap("Tilemap_TEST_01")
    assert tilemap.map_size == Vec2Int(52, 52)
    assert tilemap.tile_size == 16
    assert tilemap.scale == 3
    assert world.scene.tilemap_actor.show_debug is False


def test_can_go(world):
    assert world.scene.can_go(Vec2Int(7, 3)) is False
    assert world.scene.can_go(Vec2Int(0, 0)) is True
    assert world.scene.can_go(Vec2Int(-1, 0)) is False
    assert world.scene.can_go(Vec2Int(52, 0)) is False


def test_convert_pos(world):
    assert world.scene.convert_pos(Vec2Int(0, 0)) == Vec2(24.0, 24.0)
    first = world.scene.convert_pos(Vec2Int(2, 1))
    second = world.scene.convert_pos(Vec2Int(3, 1))
    assert second.y == first.y
    assert second.x - first.x == 16 * 3


def test_missing_map_file_gives_empty_map(tmp_path):
    build_resources(tmp_path)
    world = start(tmp_path)
    tilemap = world.scene.tilemap_actor.tilemap
    assert tilemap.map_size == Vec2Int(52, 52)
    assert all(tile.value == 0 for row in tilemap.tiles for tile in row)
    assert world.scene.can_go(Vec2Int(7, 3)) is True


def test_missing_texture_raises(tmp_path):
    build_resources(tmp_path, skip={"Sprite/Effect/blue.bmp"})
    world = managers(tmp_path)
    with pytest.raises(Exception, match="image load failed"):
        world.sm.change_scene(SceneType.DEV_SCENE)
    # textures listed before the missing one were loaded normally
    assert world.rm.texture("Coin").size == Vec2Int(128, 16)
    assert world.rm.texture("Tile_CanMove").size == Vec2Int(32, 16)


def test_f_saves_tilemap(world, tmp_path):
    world.scene.tilemap_actor.tilemap.tile_at(Vec2Int(1, 2)).value = 1
    world.im.update([KeyType.F], (0, 0))
    world.sm.update()
    saved = Tilemap()
    saved.load_file(tmp_path / "Tilemap" / "Tilemap_TEST_01.txt")
    assert saved.map_size == Vec2Int(52, 52)
    assert saved.tile_at(Vec2Int(1, 2)).value == 1
    assert saved.tile_at(Vec2Int(7, 3)).value == 1
    assert saved.tile_at(Vec2Int(0, 0)).value == 0


def test_g_reloads_tilemap(world, tmp_path):
    (tmp_path / "Tilemap" / "Tilemap_TEST_01.txt").write_text(map_text(blocked={(0, 0)}), encoding="utf-8")
    assert world.scene.can_go(Vec2Int(0, 0)) is True
    world.im.update([KeyType.G], (0, 0))
    world.sm.update()
    assert world.scene.can_go(Vec2Int(0, 0)) is False
    assert world.scene.can_go(Vec2Int(7, 3)) is True


def test_spawn_object_places_and_scales(world):
    obj = world.scene.spawn_object(lambda: GameObject(world.tm, world.sm), Vec2Int(2, 3))
    assert obj in world.scene.actors(Layer.OBJECT)
    assert obj.cell_pos == Vec2Int(2, 3)
    assert obj.pos == world.scene.convert_pos(Vec2Int(2, 3))
    assert obj.scale == 4


def test_spawn_object_rejects_non_game_object(world):
    before = list(world.scene.actors(Layer.OBJECT))
    with pytest.raises(TypeError):
        world.scene.spawn_object(Actor, Vec2Int(0, 0))
    assert list(world.scene.actors(Layer.OBJECT)) == before


def test_queries_without_tilemap():
    scene = DevScene(TimeManager(), SceneManager(), ResourceManager(), InputManager())
    assert scene.can_go(Vec2Int(0, 0)) is False
    assert scene.convert_pos(Vec2Int(3, 3)) == Vec2()