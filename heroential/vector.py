"""Two-dimensional float and integer vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

_NORMALIZE_EPSILON = 0.00000000001


@dataclass
class Vec2:
    """A mutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, ratio: float) -> Vec2:
        return Vec2(self.x * ratio, self.y * ratio)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> None:
        """Scale to unit length in place; near-zero vectors are left alone."""
        length = self.length()
        if length < _NORMALIZE_EPSILON:
            return
        self.x /= length
        self.y /= length

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        return self.x * other.y - self.y * other.x


@dataclass(frozen=True, order=True)
class Vec2Int:
    """An immutable 2D vector of integers, ordered by x then y."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vec2Int) -> Vec2Int:
        return Vec2Int(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2Int) -> Vec2Int:
        return Vec2Int(self.x - other.x, self.y - other.y)

    def __mul__(self, ratio: int) -> Vec2Int:
        return Vec2Int(self.x * ratio, self.y * ratio)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def length_squared(self) -> int:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def dot(self, other: Vec2Int) -> int:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2Int) -> int:
        return self.x * other.y - self.y * other.x

    def to_vec2(self) -> Vec2:
        return Vec2(float(self.x), float(self.y))