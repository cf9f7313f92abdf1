"""An actor that draws a tilemap's walkable and blocked cells."""

from __future__ import annotations

from typing import Iterator

import pygame

from heroential.actor import Actor
from heroential.inputs import KeyType
from heroential.settings import WIN_SIZE_X, WIN_SIZE_Y
from heroential.tilemap import Tilemap
from heroential.vector import Vec2Int


def _trunc_div(a: float, b: int) -> int:
    return int(a / b)


class TilemapActor(Actor):
    """Shows a tilemap for debugging and lets the mouse toggle tiles."""

    def __init__(self, scene_manager, resource_manager, input_manager):
        super().__init__()
        self._scene_manager = scene_manager
        self._resource_manager = resource_manager
        self._input_manager = input_manager
        self.tilemap: Tilemap | None = None
        self.show_debug = False

    def visible_cells(self) -> Iterator[Vec2Int]:
        """Cells of the map that fall inside the camera's view, row by row."""
        if self.tilemap is None:
            return
        map_size = self.tilemap.map_size
        scaled_size = self.tilemap.tile_size * self.tilemap.scale
        camera = self._scene_manager.camera_pos

        left_x = int(camera.x) - WIN_SIZE_X // 2
        left_y = int(camera.y) - WIN_SIZE_Y // 2
        right_x = int(camera.x) + WIN_SIZE_X // 2
        right_y = int(camera.y) + WIN_SIZE_Y // 2

        start_x = _trunc_div(left_x - self.pos.x, scaled_size)
        start_y = _trunc_div(left_y - self.pos.y, scaled_size)
        end_x = _trunc_div(right_x - self.pos.x, scaled_size)
        end_y = _trunc_div(right_y - self.pos.y, scaled_size)

        for y in range(max(start_y, 0), min(end_y, map_size.y - 1) + 1):
            for x in range(max(start_x, 0), min(end_x, map_size.x - 1) + 1):
                yield Vec2Int(x, y)

    def render(self, surface) -> None:
        super().render(surface)
        if self.tilemap is None or not self.show_debug:
            return

        tile_size = self.tilemap.tile_size
        scaled_size = tile_size * self.tilemap.scale
        sprites = {
            0: self._resource_manager.sprite("TileO"),
            1: self._resource_manager.sprite("TileX"),
        }
        images = {}
        for value, sprite in sprites.items():
            if sprite is None or sprite.surface() is None:
                continue
            area = pygame.Rect(sprite.x, sprite.y, tile_size, tile_size)
            image = pygame.transform.scale(sprite.surface().subsurface(area), (scaled_size, scaled_size))
            image.set_colorkey(sprite.transparent())
            images[value] = image

        camera = self._scene_manager.camera_pos
        offset_x = int(camera.x) - WIN_SIZE_X // 2
        offset_y = int(camera.y) - WIN_SIZE_Y // 2
        for cell in self.visible_cells():
            image = images.get(self.tilemap.tiles[cell.y][cell.x].value)
            if image is None:
                continue
            dest = (
                int(self.pos.x + cell.x * scaled_size - offset_x),
                int(self.pos.y + cell.y * scaled_size - offset_y),
            )
            surface.blit(image, dest)

    def tick_picking(self) -> None:
        """Toggle the tile under the mouse between walkable and blocked on a click."""
        if self.tilemap is None or not self._input_manager.button_down(KeyType.LEFT_MOUSE):
            return
        camera = self._scene_manager.camera_pos
        screen_x = int(camera.x - WIN_SIZE_X // 2)
        screen_y = int(camera.y - WIN_SIZE_Y // 2)

        mouse = self._input_manager.mouse_pos
        pos_x = mouse.x + screen_x
        pos_y = mouse.y + screen_y

        scaled_size = self.tilemap.tile_size * self.tilemap.scale
        tile = self.tilemap.tile_at(Vec2Int(_trunc_div(pos_x, scaled_size), _trunc_div(pos_y, scaled_size)))
        tile.value = 1 if tile.value == 0 else 0