"""Mutable authoritative field state — only mutated by the FieldEngine."""

from __future__ import annotations

from goopfield.core.enums import Direction
from goopfield.core.errors import UnknownEnemyError
from goopfield.core.grid import Grid
from goopfield.core.models import PLAYER, Enemy, Player, Position, Tile


class FieldState:
    """The single source of truth for one round."""

    __slots__ = ("grid", "enemies", "player", "last_direction", "round", "_next_enemy_id")

    def __init__(self, grid: Grid, player: Player, round: int = 0, first_enemy_id: int = 1) -> None:
        self.grid: Grid = grid
        self.enemies: dict[int, Enemy] = {}
        self.player: Player = player
        self.last_direction: Direction | None = None
        self.round: int = round
        self._next_enemy_id: int = first_enemy_id
        grid.place(player.pos, PLAYER)

    @property
    def next_enemy_id(self) -> int:
        return self._next_enemy_id

    def allocate_enemy_id(self) -> int:
        eid = self._next_enemy_id
        self._next_enemy_id += 1
        return eid

    # -- enemies --

    def get_enemy(self, enemy_id: int) -> Enemy:
        try:
            return self.enemies[enemy_id]
        except KeyError:
            raise UnknownEnemyError(enemy_id) from None

    def add_enemy(self, enemy: Enemy) -> None:
        self.grid.place(enemy.pos, Tile.enemy(enemy.id))
        self.enemies[enemy.id] = enemy

    def remove_enemy(self, enemy_id: int) -> Enemy:
        enemy = self.get_enemy(enemy_id)
        self.grid.clear(enemy.pos)
        del self.enemies[enemy_id]
        return enemy

    def move_enemy(self, enemy_id: int, new_pos: Position) -> Position:
        """Move an enemy on grid and registry; returns its old position."""
        enemy = self.get_enemy(enemy_id)
        old_pos = enemy.pos
        self.grid.move(old_pos, new_pos)
        enemy.pos = new_pos
        return old_pos

    # -- player --

    def move_player(self, new_pos: Position) -> None:
        if new_pos == self.player.pos:
            return
        self.grid.move(self.player.pos, new_pos)
        self.player.pos = new_pos

    def validate(self) -> None:
        self.grid.validate(self.enemies, self.player.pos)
