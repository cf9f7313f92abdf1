import pygame

from heroential.inputs import InputManager, KeyType
from heroential.resource_manager import ResourceManager
from heroential.resources import Texture
from heroential.scene_manager import SceneManager
from heroential.settings import WIN_SIZE_X, WIN_SIZE_Y
from heroential.tilemap import Tilemap
from heroential.tilemap_actor import TilemapActor
from heroential.vector import Vec2, Vec2Int

GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
BLACK = (0, 0, 0)


def make_actor(width=52, height=52):
    scene_manager = SceneManager()
    resource_manager = ResourceManager()
    input_manager = InputManager()
    actor = TilemapActor(scene_manager, resource_manager, input_manager)
    tilemap = Tilemap()
    tilemap.set_map_size(Vec2Int(width, height))
    tilemap.tile_size = 16
    tilemap.scale = 3
    actor.tilemap = tilemap
    return actor, scene_manager, resource_manager, input_manager


def test_no_tilemap_no_cells():
    actor = TilemapActor(SceneManager(), ResourceManager(), InputManager())
    assert list(actor.visible_cells()) == []


def test_small_map_fully_visible():
    actor, *_ = make_actor(4, 3)
    cells = list(actor.visible_cells())
    assert len(cells) == 12
    assert cells[0] == Vec2Int(0, 0)
    assert cells[-1] == Vec2Int(3, 2)


def test_visible_cells_stay_inside_map_and_view():
    actor, scene_manager, *_ = make_actor()
    scene_manager.camera_pos = Vec2(600, 500)
    scaled = actor.tilemap.tile_size * actor.tilemap.scale
    cells = list(actor.visible_cells())
    assert cells
    for cell in cells:
        assert 0 <= cell.x < actor.tilemap.map_size.x
        assert 0 <= cell.y < actor.tilemap.map_size.y
        assert (cell.x + 1) * scaled > 600 - WIN_SIZE_X // 2
        assert cell.x * scaled <= 600 + WIN_SIZE_X // 2


def test_moving_camera_right_drops_left_column():
    actor, scene_manager, *_ = make_actor()
    before = {cell.x for cell in actor.visible_cells()}
    scene_manager.camera_pos = Vec2(scene_manager.camera_pos.x + 200, scene_manager.camera_pos.y)
    after = {cell.x for cell in actor.visible_cells()}
    assert 0 in before
    assert 0 not in after
    assert max(after) > max(before)


def test_picking_toggles_tile_on_click():
    actor, _, _, input_manager = make_actor()
    input_manager.update([KeyType.LEFT_MOUSE], (10, 10))
    actor.tick_picking()
    assert actor.tilemap.tile_at(Vec2Int(0, 0)).value == 1

    input_manager.update([KeyType.LEFT_MOUSE], (10, 10))
    actor.tick_picking()
    assert actor.tilemap.tile_at(Vec2Int(0, 0)).value == 1

    input_manager.update([], (10, 10))
    input_manager.update([KeyType.LEFT_MOUSE], (10, 10))
    actor.tick_picking()
    assert actor.tilemap.tile_at(Vec2Int(0, 0)).value == 0


def test_render_only_with_debug_shown():
    actor, _, resource_manager, _ = make_actor()
    sheet = pygame.Surface((32, 16))
    sheet.fill(GREEN, pygame.Rect(0, 0, 16, 16))
    sheet.fill(BLUE, pygame.Rect(16, 0, 16, 16))
    texture = Texture(sheet)
    resource_manager.create_sprite("TileO", texture, 0, 0, 16, 16)
    resource_manager.create_sprite("TileX", texture, 16, 0, 32, 16)
    actor.tilemap.tile_at(Vec2Int(0, 0)).value = 1

    target = pygame.Surface((WIN_SIZE_X, WIN_SIZE_Y))
    target.fill(BLACK)
    actor.render(target)
    assert target.get_at((10, 10))[:3] == BLACK

    actor.show_debug = True
    actor.render(target)
    scaled = actor.tilemap.tile_size * actor.tilemap.scale
    assert target.get_at((10, 10))[:3] == BLUE
    assert target.get_at((scaled + 10, 10))[:3] == GREEN