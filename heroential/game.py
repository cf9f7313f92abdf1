"""The game loop: managers, double-buffered rendering and the window."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pygame

from heroential.dev_scene import DevScene
from heroential.draw import WHITE, draw_text
from heroential.inputs import InputManager, KeyType
from heroential.resource_manager import ResourceManager
from heroential.resources import TextureLoadError
from heroential.scene_manager import SceneManager
from heroential.settings import WIN_SIZE_X, WIN_SIZE_Y, SceneType
from heroential.timing import TimeManager

_MOUSE_TEXT_POS = (20, 10)
_FPS_TEXT_POS = (550, 10)

_KEY_CODES = {
    pygame.K_UP: KeyType.UP,
    pygame.K_DOWN: KeyType.DOWN,
    pygame.K_LEFT: KeyType.LEFT,
    pygame.K_RIGHT: KeyType.RIGHT,
    pygame.K_SPACE: KeyType.SPACE_BAR,
    **{getattr(pygame, f"K_{c}"): ord(c.upper()) for c in "abcdefghijklmnopqrstuvwxyz0123456789"},
}


class Game:
    """Owns the managers and draws each frame into a back buffer before showing it."""

    def __init__(self, resource_path):
        self.resource_path = Path(resource_path)
        self.time_manager = TimeManager()
        self.input_manager = InputManager()
        self.resource_manager = ResourceManager()
        self.scene_manager = SceneManager()
        self.screen: pygame.Surface | None = None
        self.back_buffer: pygame.Surface | None = None
        self.font: pygame.font.Font | None = None

    def init(self, screen: pygame.Surface) -> None:
        """Attach to ``screen``, set up the managers and open the development scene."""
        self.screen = screen
        self.back_buffer = pygame.Surface(screen.get_size())
        self.back_buffer.fill(WHITE)
        pygame.font.init()
        self.font = pygame.font.Font(None, 18)

        self.time_manager.start()
        self.resource_manager.init(self.resource_path)
        self.scene_manager.register(
            SceneType.DEV_SCENE,
            lambda: DevScene(self.time_manager, self.scene_manager, self.resource_manager, self.input_manager),
        )
        self.scene_manager.change_scene(SceneType.DEV_SCENE)

    def update(self, pressed, mouse_pos) -> None:
        """Advance one frame given the held key codes and the mouse position."""
        self.time_manager.update()
        self.input_manager.update(pressed, mouse_pos)
        self.scene_manager.update()

    def overlay_lines(self) -> list[tuple[tuple[int, int], str]]:
        """The status texts drawn over the scene, with their positions."""
        mouse = self.input_manager.mouse_pos
        return [
            (_MOUSE_TEXT_POS, f"Mouse({mouse.x}, {mouse.y})"),
            (_FPS_TEXT_POS, f"FPS({self.time_manager.fps}), DT({self.time_manager.delta_time})"),
        ]

    def render(self) -> None:
        """Draw the scene and overlay into the back buffer, copy it to the screen and clear it."""
        if self.screen is None or self.back_buffer is None:
            raise RuntimeError("game has not been initialised")
        self.scene_manager.render(self.back_buffer)
        for pos, text in self.overlay_lines():
            draw_text(self.back_buffer, pos, text, self.font)
        self.screen.blit(self.back_buffer, (0, 0))
        self.back_buffer.fill(WHITE)


def _pressed_codes() -> list[int]:
    keys = pygame.key.get_pressed()
    codes = [int(code) for key, code in _KEY_CODES.items() if keys[key]]
    left, _, right = pygame.mouse.get_pressed()[:3]
    if left:
        codes.append(int(KeyType.LEFT_MOUSE))
    if right:
        codes.append(int(KeyType.RIGHT_MOUSE))
    return codes


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="heroential", description="Run the game.")
    parser.add_argument(
        "--resources",
        type=Path,
        default=Path.cwd().parent / "Resources",
        help="directory holding the game's resources",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_SIZE_X, WIN_SIZE_Y))
        pygame.display.set_caption("Client")
        game = Game(args.resources)
        try:
            game.init(screen)
        except TextureLoadError as exc:
            print(exc, file=sys.stderr)
            return 1

        clock = pygame.time.Clock()
        while True:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                return 0
            game.update(_pressed_codes(), pygame.mouse.get_pos())
            game.render()
            pygame.display.flip()
            clock.tick(1000)
    finally:
        pygame.quit()