"""Tests for MatchResolver — chain elimination and color swap."""

from __future__ import annotations

from goopfield.core.enums import Color, Direction
from goopfield.core.events import EnemyColorChanged, EnemyRemoved, PlayerColorChanged
from goopfield.core.field_state import FieldState
from goopfield.core.grid import Grid
from goopfield.core.models import Enemy, Player, Position
from goopfield.engine.match_resolver import MatchResolver


def _state(color: Color = Color.RED, direction: Direction = Direction.UP) -> FieldState:
    return FieldState(Grid(18, 12, 4), Player(pos=Position(8, 6), color=color, direction=direction))


def _add(state: FieldState, x: int, y: int, color: Color) -> int:
    eid = state.allocate_enemy_id()
    state.add_enemy(Enemy(id=eid, pos=Position(x, y), color=color))
    return eid


class TestChainElimination:

    def test_two_matches_then_swap(self):
        state = _state(Color.RED)
        a = _add(state, 8, 5, Color.RED)
        b = _add(state, 8, 3, Color.RED)
        c = _add(state, 8, 1, Color.BLUE)

        result = MatchResolver().resolve(state)

        assert result.eliminated == 2
        assert a not in state.enemies and b not in state.enemies
        assert state.enemies[c].pos == Position(8, 1)
        assert state.player.color == Color.BLUE
        assert state.enemies[c].color == Color.RED
        assert result.target == Position(8, 1)
        assert result.events == [
            EnemyRemoved(a),
            EnemyRemoved(b),
            PlayerColorChanged(Color.BLUE),
            EnemyColorChanged(c, Color.RED),
        ]
        state.validate()

    def test_mismatch_first_stops_immediately(self):
        state = _state(Color.GREEN)
        near = _add(state, 8, 4, Color.PURPLE)
        far = _add(state, 8, 2, Color.GREEN)
        result = MatchResolver().resolve(state)
        assert result.eliminated == 0
        assert far in state.enemies and near in state.enemies
        assert state.player.color == Color.PURPLE
        assert result.target == Position(8, 4)

    def test_nothing_in_line(self):
        state = _state()
        _add(state, 9, 2, Color.RED)
        result = MatchResolver().resolve(state)
        assert result.eliminated == 0
        assert result.target == state.player.pos
        assert result.events == []

    def test_chain_runs_to_border(self):
        state = _state(Color.GREEN, Direction.RIGHT)
        for x in (10, 13, 17):
            _add(state, x, 6, Color.GREEN)
        result = MatchResolver().resolve(state)
        assert result.eliminated == 3
        assert state.enemies == {}
        assert result.target == Position(17, 6)

    def test_behind_the_player_is_ignored(self):
        state = _state(Color.RED, Direction.UP)
        _add(state, 8, 9, Color.RED)
        result = MatchResolver().resolve(state)
        assert result.eliminated == 0

    def test_each_direction_scans_its_own_line(self):
        for direction, (x, y) in {
            Direction.LEFT: (2, 6),
            Direction.RIGHT: (15, 6),
            Direction.UP: (8, 0),
            Direction.DOWN: (8, 11),
        }.items():
            state = _state(Color.BLUE, direction)
            eid = _add(state, x, y, Color.BLUE)
            result = MatchResolver().resolve(state)
            assert result.eliminated == 1, direction
            assert eid not in state.enemies


class TestFindEnemy:

    def test_starts_strictly_beyond_origin(self):
        state = _state()
        eid = _add(state, 8, 5, Color.RED)
        hit = MatchResolver().find_enemy(state, Position(8, 6), Direction.UP)
        assert hit == (eid, Position(8, 5))
        assert MatchResolver().find_enemy(state, Position(8, 5), Direction.UP) is None
