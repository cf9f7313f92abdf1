# heroential

A small top-down action role-playing game built on pygame. A warrior walks
a tile map cell by cell, is followed by a camera that stays inside the map,
and swings a sword that sends a sonic wave toward the mouse position.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
heroential
```

The game opens an 800×600 window titled "Client". It looks for its bitmaps
and tile map in a `Resources` directory inside the parent of the directory
you start it from. Another directory can be given with `--resources`:

```
heroential --resources path/to/Resources
```

The directory must hold these bitmaps:

- `Sprite/Item/coin_gold.bmp`
- `Sprite/Map/test-01.bmp`
- `Sprite/Map/Tile-CanMove.bmp`
- `Sprite/Player/Warrior_Blue.bmp`
- `Sprite/Effect/blue.bmp`

and may hold the tile map `Tilemap/Tilemap_TEST_01.txt`. If a bitmap cannot
be loaded the command prints the error and exits with status 1. A missing
tile map leaves a 52×52 map of open ground.

Controls:

- `W`, `A`, `S`, `D` move one cell up, down, left or right, if that cell is on the map and not a wall
- left mouse button attacks; when the swing animation ends a sonic wave
  flies toward the mouse position and disappears after five seconds
- `1` selects the sword
- `F` saves the current tile map to `Tilemap/Tilemap_TEST_01.txt`, `G` loads it again

The mouse position, frames per second and the last frame's delta time are
shown at the top of the window.

## Tile map files

A tile map is a plain text file: the width on the first line, the height on
the second, then one line per row with one digit per cell. `0` is open
ground and `1` is a wall.

```
3
2
010
000
```

`heroential.tilemap.Tilemap` reads and writes this format with `load_file`
and `save_file`; a file with a missing or malformed size, or too few or too
short rows, raises `ValueError`.

## Using the pieces

The engine parts can be used on their own:

- `heroential.vector` – `Vec2` and `Vec2Int`
- `heroential.settings` – window size, `Layer`, `Dir`, `ObjectState`, `WeaponType` and other enumerations
- `heroential.tilemap` – `Tile` and `Tilemap`
- `heroential.timing` – `TimeManager`, frame delta time and FPS, with an injectable clock
- `heroential.inputs` – `InputManager`, with `button`, `button_down` and `button_up`
- `heroential.resources` – `Texture`, `Sprite`, `Flipbook` and `FlipbookInfo`
- `heroential.resource_manager` – `ResourceManager` for textures, sprites, flipbooks and tile maps
- `heroential.scene_manager` – `SceneManager`, the current scene and camera position
- `heroential.scene`, `heroential.dev_scene` – scenes and their actors by layer
- `heroential.actor`, `heroential.sprite_actor`, `heroential.flipbook_actor`,
  `heroential.tilemap_actor` – actors and components such as `CameraComponent`
- `heroential.game_object`, `heroential.creature`, `heroential.player`,
  `heroential.projectile` – the objects that live on the map
- `heroential.draw` – simple drawing helpers and `read_bmp`
- `heroential.game` – `Game`, which ties the managers together, and `main`

```python
from heroential.tilemap import Tilemap
from heroential.vector import Vec2Int

tilemap = Tilemap()
tilemap.set_map_size(Vec2Int(4, 3))
tilemap.tile_at(Vec2Int(1, 2)).value = 1
tilemap.save_file("walls.txt")
```

## What it does not do

There are no enemies, no sound and no menus. `Creature.on_damaged` and
`Scene.creature_at` exist, but nothing in the game calls them, so sonic
waves do not hit anything. The tile map's debug display is switched off,
and `TilemapActor.tick_picking`, which toggles the tile under the mouse, is
not called during play. Walls can only be changed by editing the tile map
file.