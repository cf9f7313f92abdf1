"""Drawing helpers for surfaces and a raw bitmap header reader."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from functools import lru_cache

import pygame

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

_FILE_HEADER = struct.Struct("<2sIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")


@dataclass(frozen=True)
class BmpInfo:
    """The headers of a bitmap file and the pixel bytes that follow them."""

    file_type: bytes
    file_size: int
    offset: int
    header_size: int
    width: int
    height: int
    planes: int
    bit_count: int
    compression: int
    image_size: int
    pixels: bytes


@lru_cache(maxsize=1)
def _default_font() -> pygame.font.Font:
    pygame.font.init()
    return pygame.font.Font(None, 18)


def _point(pos) -> tuple[int, int]:
    x, y = pos
    return int(x), int(y)


def draw_text(surface: pygame.Surface, pos, text: str, font: pygame.font.Font | None = None) -> pygame.Rect:
    """Write black text on a white background with its top-left corner at ``pos``."""
    image = (font or _default_font()).render(text, True, BLACK, WHITE)
    return surface.blit(image, _point(pos))


def draw_rect(surface: pygame.Surface, pos, w: int, h: int) -> pygame.Rect:
    """Draw a white rectangle with a black outline centred on ``pos``."""
    x, y = pos
    half_w = int(w / 2)
    half_h = int(h / 2)
    left, top = int(x - half_w), int(y - half_h)
    right, bottom = int(x + half_w), int(y + half_h)
    rect = pygame.Rect(left, top, right - left, bottom - top)
    pygame.draw.rect(surface, WHITE, rect)
    pygame.draw.rect(surface, BLACK, rect, 1)
    return rect


def draw_circle(surface: pygame.Surface, pos, radius: int) -> pygame.Rect:
    """Draw a white circle with a black outline centred on ``pos``."""
    x, y = pos
    left, top = int(x - radius), int(y - radius)
    right, bottom = int(x + radius), int(y + radius)
    rect = pygame.Rect(left, top, right - left, bottom - top)
    pygame.draw.ellipse(surface, WHITE, rect)
    pygame.draw.ellipse(surface, BLACK, rect, 1)
    return rect


def draw_line(surface: pygame.Surface, start, end) -> pygame.Rect:
    """Draw a one-pixel black line."""
    return pygame.draw.line(surface, BLACK, _point(start), _point(end))


def draw_line_colored(surface: pygame.Surface, start, end, color) -> pygame.Rect:
    """Draw a one-pixel line in ``color``."""
    return pygame.draw.line(surface, color, _point(start), _point(end))


def read_bmp(path) -> BmpInfo:
    """Read a bitmap's file and info headers and the 32-bit pixel block right after them."""
    with open(path, "rb") as stream:
        file_header = stream.read(_FILE_HEADER.size)
        if len(file_header) < _FILE_HEADER.size:
            raise ValueError(f"{path}: truncated file header")
        info_header = stream.read(_INFO_HEADER.size)
        if len(info_header) < _INFO_HEADER.size:
            raise ValueError(f"{path}: truncated info header")

        file_type, file_size, _, _, offset = _FILE_HEADER.unpack(file_header)
        (
            header_size,
            width,
            height,
            planes,
            bit_count,
            compression,
            image_size,
            _,
            _,
            _,
            _,
        ) = _INFO_HEADER.unpack(info_header)

        pixel_bytes = width * abs(height) * 4
        pixels = stream.read(pixel_bytes) if pixel_bytes > 0 else b""

    return BmpInfo(
        file_type=file_type,
        file_size=file_size,
        offset=offset,
        header_size=header_size,
        width=width,
        height=height,
        planes=planes,
        bit_count=bit_count,
        compression=compression,
        image_size=image_size,
        pixels=pixels,
    )