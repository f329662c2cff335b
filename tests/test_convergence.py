"""Tests for ConvergenceMover — lane shifting toward the core zone."""

from __future__ import annotations

import unittest

from goopfield.config import FieldConfig
from goopfield.core.enums import Color, Direction
from goopfield.core.events import EnemySpawned
from goopfield.core.field_state import FieldState
from goopfield.core.grid import Grid
from goopfield.core.models import Enemy, Player, Position
from goopfield.engine.convergence import ConvergenceMover
from goopfield.engine.win_loss import WinLossEvaluator
from goopfield.systems.rng import DeterministicRNG


def _state(player_pos: Position = Position(8, 6)) -> FieldState:
    return FieldState(Grid(18, 12, 4), Player(pos=player_pos, color=Color.RED))


def _add(state: FieldState, x: int, y: int, color: Color = Color.GREEN) -> int:
    eid = state.allocate_enemy_id()
    state.add_enemy(Enemy(id=eid, pos=Position(x, y), color=color))
    return eid


def _mover() -> ConvergenceMover:
    return ConvergenceMover(FieldConfig(), DeterministicRNG(42))


class TestScanOrder(unittest.TestCase):

    def test_right_scans_from_centre_outward(self):
        order = _mover().scan_order(Direction.RIGHT, Position(0, 5))
        self.assertEqual([p.x for p in order], [8, 7, 6, 5, 4, 3, 2, 1, 0])
        self.assertTrue(all(p.y == 5 for p in order))

    def test_left_scans_from_centre_outward(self):
        order = _mover().scan_order(Direction.LEFT, Position(17, 4))
        self.assertEqual([p.x for p in order], list(range(9, 18)))

    def test_down_and_up(self):
        self.assertEqual([p.y for p in _mover().scan_order(Direction.DOWN, Position(8, 0))], [5, 4, 3, 2, 1, 0])
        self.assertEqual([p.y for p in _mover().scan_order(Direction.UP, Position(8, 11))], list(range(6, 12)))


class TestAdvance(unittest.TestCase):

    def test_right_lane_shift_then_insert(self):
        state = _state()
        a = _add(state, 3, 5)
        b = _add(state, 5, 5)
        mover = _mover()

        result = mover.advance(state, Direction.RIGHT, Position(0, 5))
        spawned = mover.insert(state, Position(0, 5))

        self.assertEqual(state.enemies[a].pos, Position(4, 5))
        self.assertEqual(state.enemies[b].pos, Position(6, 5))
        self.assertEqual(state.grid.get(Position(0, 5)).enemy_id, spawned.enemy_id)
        self.assertTrue(state.grid.get(Position(3, 5)).is_empty)
        self.assertTrue(state.grid.get(Position(5, 5)).is_empty)
        # Enemy nearest the centre moves first
        self.assertEqual([m.enemy_id for m in result.moves], [b, a])
        self.assertIsNone(result.contact)
        state.validate()

    def test_adjacent_enemies_do_not_overwrite_each_other(self):
        state = _state()
        ids = [_add(state, x, 5) for x in (0, 1, 2)]
        _mover().advance(state, Direction.RIGHT, Position(0, 5))
        self.assertEqual([state.enemies[i].pos.x for i in ids], [1, 2, 3])
        state.validate()

    def test_left_lane(self):
        state = _state()
        eid = _add(state, 17, 4)
        _mover().advance(state, Direction.LEFT, Position(17, 4))
        self.assertEqual(state.enemies[eid].pos, Position(16, 4))

    def test_down_and_up_lanes(self):
        state = _state(Position(9, 6))
        top = _add(state, 8, 0)
        bottom = _add(state, 8, 11)
        mover = _mover()
        mover.advance(state, Direction.DOWN, Position(8, 0))
        mover.advance(state, Direction.UP, Position(8, 11))
        self.assertEqual(state.enemies[top].pos, Position(8, 1))
        self.assertEqual(state.enemies[bottom].pos, Position(8, 10))

    def test_other_lanes_untouched(self):
        state = _state()
        other = _add(state, 3, 4)
        far_side = _add(state, 14, 5)
        _mover().advance(state, Direction.RIGHT, Position(0, 5))
        self.assertEqual(state.enemies[other].pos, Position(3, 4))
        self.assertEqual(state.enemies[far_side].pos, Position(14, 5))

    def test_move_events_carry_duration(self):
        state = _state()
        _add(state, 2, 5)
        result = _mover().advance(state, Direction.RIGHT, Position(0, 5))
        self.assertEqual(len(result.moves), 1)
        move = result.moves[0]
        self.assertEqual((move.from_pos, move.to_pos), (Position(2, 5), Position(3, 5)))
        self.assertEqual(move.duration, FieldConfig().enemy_move_duration)

    def test_boundary_enemy_enters_core(self):
        state = _state(Position(9, 6))
        eid = _add(state, 6, 5)
        _mover().advance(state, Direction.RIGHT, Position(0, 5))
        self.assertEqual(state.enemies[eid].pos, Position(7, 5))
        self.assertTrue(WinLossEvaluator().is_lost(state.grid))

    def test_player_contact_stops_the_lane(self):
        state = _state(Position(7, 5))
        front = _add(state, 6, 5)
        behind = _add(state, 5, 5)
        result = _mover().advance(state, Direction.RIGHT, Position(0, 5))
        self.assertEqual(result.contact, Position(6, 5))
        self.assertEqual(result.moves, [])
        self.assertEqual(state.enemies[front].pos, Position(6, 5))
        self.assertEqual(state.enemies[behind].pos, Position(5, 5))
        state.validate()


class TestInsert(unittest.TestCase):

    def test_fresh_ids_and_registration(self):
        state = _state()
        mover = _mover()
        first = mover.insert(state, Position(0, 4))
        mover.advance(state, Direction.RIGHT, Position(0, 4))
        second = mover.insert(state, Position(0, 4))
        self.assertIsInstance(first, EnemySpawned)
        self.assertEqual(second.enemy_id, first.enemy_id + 1)
        self.assertEqual(state.enemies[second.enemy_id].color, second.color)
        self.assertEqual(len(state.enemies), 2)
