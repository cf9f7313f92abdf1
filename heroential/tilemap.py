"""Grid of tiles with a plain-text file format."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from heroential.resources import ResourceBase
from heroential.vector import Vec2Int


@dataclass
class Tile:
    value: int = 0


@dataclass(eq=False)
class Tilemap(ResourceBase):
    """A map of tiles indexed as ``tiles[y][x]``.

    The file form is the width and height on their own lines, then one line
    of digits per row.
    """

    map_size: Vec2Int = field(default_factory=Vec2Int)
    tile_size: int = 0
    scale: int = 1
    tiles: list[list[Tile]] = field(default_factory=list)

    def set_map_size(self, size: Vec2Int) -> None:
        """Resize to ``size`` and reset every tile to zero."""
        self.map_size = size
        self.tiles = [[Tile() for _ in range(size.x)] for _ in range(size.y)]

    def tile_at(self, pos: Vec2Int) -> Tile:
        if not (0 <= pos.x < self.map_size.x and 0 <= pos.y < self.map_size.y):
            raise IndexError(f"tile position {pos} outside map of size {self.map_size}")
        return self.tiles[pos.y][pos.x]

    def load_file(self, path) -> None:
        tokens = Path(path).read_text(encoding="utf-8").split()
        if len(tokens) < 2:
            raise ValueError(f"{path}: missing map size")
        try:
            width, height = int(tokens[0]), int(tokens[1])
        except ValueError as exc:
            raise ValueError(f"{path}: malformed map size") from exc
        rows = tokens[2 : 2 + height]
        if len(rows) < height:
            raise ValueError(f"{path}: expected {height} rows, found {len(rows)}")
        if any(len(row) < width for row in rows):
            raise ValueError(f"{path}: a row is shorter than {width}")

        self.set_map_size(Vec2Int(width, height))
        self.tiles = [[Tile(ord(ch) - ord("0")) for ch in row[:width]] for row in rows]

    def save_file(self, path) -> None:
        lines = [str(self.map_size.x), str(self.map_size.y)]
        lines.extend("".join(str(tile.value) for tile in row) for row in self.tiles)
        Path(path).write_text("".join(line + "\n" for line in lines), encoding="utf-8")