"""The player character: grid movement from the keyboard and a sword attack."""

from __future__ import annotations

from heroential.creature import Creature
from heroential.inputs import KeyType
from heroential.projectile import SonicWave
from heroential.settings import Dir, ObjectState, WeaponType
from heroential.vector import Vec2

_MOVE_SPEED = 200.0
_ARRIVAL_DISTANCE = 5.0
_PLAYER_ATTACK = 100

_MOVE_KEYS = (
    (KeyType.W, Dir.UP),
    (KeyType.S, Dir.DOWN),
    (KeyType.A, Dir.LEFT),
    (KeyType.D, Dir.RIGHT),
)


class Player(Creature):
    """A creature steered cell by cell with WASD that fires sonic waves with the mouse."""

    def __init__(self, time_manager, scene_manager, resource_manager, input_manager):
        super().__init__(time_manager, scene_manager)
        self._resource_manager = resource_manager
        self._input_manager = input_manager

        flipbook = resource_manager.flipbook
        self.flipbook_idle = {
            Dir.LEFT: flipbook("Player_IdleLeft"),
            Dir.RIGHT: flipbook("Player_IdleRight"),
            Dir.UP: flipbook("Player_IdleLeft"),
            Dir.DOWN: flipbook("Player_IdleRight"),
        }
        self.flipbook_move = {
            Dir.LEFT: flipbook("Player_MoveLeft"),
            Dir.RIGHT: flipbook("Player_MoveRight"),
            Dir.UP: flipbook("Player_MoveLeft"),
            Dir.DOWN: flipbook("Player_MoveRight"),
        }
        self.flipbook_attack = {
            Dir.RIGHT: flipbook("Player_AttackRight1"),
            Dir.LEFT: flipbook("Player_AttackLeft1"),
            Dir.UP: flipbook("Player_AttackUp1"),
            Dir.DOWN: flipbook("Player_AttackDown1"),
        }

        self.key_pressed = False
        self.weapon_type = WeaponType.SWORD
        self.stat.attack = _PLAYER_ATTACK

    def begin_play(self) -> None:
        super().begin_play()
        self.set_state(ObjectState.MOVE)
        self.set_state(ObjectState.IDLE)
        self.set_cell_pos(self.cell_pos.__class__(5, 5), True)

    def tick_idle(self) -> None:
        self.key_pressed = True
        direction = next(
            (d for key, d in _MOVE_KEYS if self._input_manager.button(key)),
            None,
        )
        if direction is None:
            self.key_pressed = False
            if self.state is ObjectState.IDLE:
                self.update_animation()
        else:
            self.set_dir(direction)
            next_pos = self.cell_pos + direction.delta()
            if self.can_go(next_pos):
                self.set_cell_pos(next_pos)
                self.set_state(ObjectState.MOVE)

        if self._input_manager.button_down(KeyType.KEY_1):
            self.weapon_type = WeaponType.SWORD

        if self._input_manager.button_down(KeyType.LEFT_MOUSE):
            self.set_state(ObjectState.SKILL)

    def tick_move(self) -> None:
        delta_time = self._time_manager.delta_time
        if (self.dest_pos - self.pos).length() < _ARRIVAL_DISTANCE:
            self.set_state(ObjectState.IDLE)
            self.pos = Vec2(self.dest_pos.x, self.dest_pos.y)
            return

        step = _MOVE_SPEED * delta_time
        direction = Dir(self.dir)
        if direction is Dir.UP:
            self.pos.y -= step
        elif direction is Dir.DOWN:
            self.pos.y += step
        elif direction is Dir.LEFT:
            self.pos.x -= step
        else:
            self.pos.x += step

    def tick_skill(self) -> None:
        if self.flipbook is None:
            return
        if not self.is_animation_ended():
            return

        scene = self._scene_manager.current_scene
        if scene is None or not hasattr(scene, "spawn_object") or not hasattr(scene, "convert_pos"):
            return

        if self.weapon_type is WeaponType.SWORD:
            wave = scene.spawn_object(self._make_sonic_wave, self.cell_pos)
            start = scene.convert_pos(self.cell_pos)
            wave.pos = Vec2(start.x, start.y)
            mouse = self._input_manager.mouse_pos
            wave.dest_pos = Vec2(float(mouse.x), float(mouse.y))
            wave.set_direction_vector(wave.pos, wave.dest_pos)

        self.set_state(ObjectState.IDLE)

    def _make_sonic_wave(self) -> SonicWave:
        return SonicWave(self._time_manager, self._scene_manager, self._resource_manager)

    def update_animation(self) -> None:
        direction = Dir(self.dir)
        if self.state is ObjectState.IDLE:
            table = self.flipbook_move if self.key_pressed else self.flipbook_idle
            self.set_flipbook(table[direction])
        elif self.state is ObjectState.MOVE:
            self.set_flipbook(self.flipbook_move[direction])
        elif self.state is ObjectState.SKILL:
            if self.weapon_type is WeaponType.SWORD:
                self.set_flipbook(self.flipbook_attack[direction])