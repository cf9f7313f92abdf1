"""Creatures: game objects with combat stats."""

from __future__ import annotations

from dataclasses import dataclass

from heroential.game_object import GameObject


@dataclass
class Stat:
    hp: int = 100
    max_hp: int = 100
    attack: int = 10
    defence: int = 0
    speed: float = 0.0


class Creature(GameObject):
    """A game object that can take damage and die."""

    def __init__(self, time_manager, scene_manager):
        super().__init__(time_manager, scene_manager)
        self.stat = Stat()

    def on_damaged(self, attacker: Creature | None) -> None:
        """Take the attacker's attack less this creature's defence; leave the scene at zero hp."""
        if attacker is None:
            return
        damage = attacker.stat.attack - self.stat.defence
        if damage <= 0:
            return
        self.stat.hp = max(0, self.stat.hp - damage)
        if self.stat.hp == 0:
            scene = self._scene_manager.current_scene
            if scene is not None:
                scene.remove_actor(self)

    def is_dead(self) -> bool:
        return self.stat.hp <= 0