"""Tests for the EngineManager and the API route functions."""

from __future__ import annotations

import time
import unittest

import pytest
from fastapi import HTTPException

from goopfield.api.engine_manager import EngineManager
from goopfield.api.routes.config import get_config
from goopfield.api.routes.control import ControlAction, control
from goopfield.api.routes.input import Acknowledgement, MoveDirection, acknowledge, move, shoot
from goopfield.api.routes.map import get_map, rle_encode
from goopfield.api.routes.metadata import get_enums
from goopfield.api.routes.state import get_state, get_stats
from goopfield.config import FieldConfig
from goopfield.core.enums import Direction


def _manager(**overrides) -> EngineManager:
    return EngineManager(FieldConfig(**overrides))


class TestEngineManager(unittest.TestCase):

    def test_initial_snapshot_and_events(self):
        mgr = _manager()
        snap = mgr.get_snapshot()
        self.assertIsNotNone(snap)
        self.assertEqual(snap.round, 0)
        kinds = [e.event.kind for e in mgr.event_log.latest()]
        self.assertIn("player_moved", kinds)

    def test_spawn_tick_publishes(self):
        mgr = _manager()
        mgr.spawn_tick()
        self.assertEqual(mgr.total_spawned, 1)
        self.assertEqual(len(mgr.get_snapshot().enemies), 1)
        self.assertEqual(mgr.event_log.latest(1)[0].event.kind, "enemy_spawned")

    def test_timer_receives_multiplier(self):
        mgr = _manager(base_spawn_interval=2.0)
        mgr.set_interval_multiplier(0.9)
        self.assertAlmostEqual(mgr.spawn_interval, 1.8)

    def test_loss_counts_and_resets_round(self):
        mgr = _manager(seed=8)
        while mgr.total_losses == 0:
            mgr.spawn_tick()
            self.assertLess(mgr.total_spawned, 300)
        snap = mgr.get_snapshot()
        self.assertEqual(snap.round, 1)
        self.assertEqual(snap.score, 0)

    def test_busy_accessors(self):
        mgr = _manager()
        self.assertTrue(mgr.move(Direction.UP))
        self.assertTrue(mgr.is_moving())
        self.assertFalse(mgr.move(Direction.DOWN))
        mgr.acknowledge("end_movement")
        self.assertFalse(mgr.is_moving())

    def test_unknown_acknowledgement(self):
        with self.assertRaises(ValueError):
            _manager().acknowledge("reset")

    def test_reset_starts_fresh_session(self):
        mgr = _manager()
        for _ in range(5):
            mgr.spawn_tick()
        mgr.reset()
        self.assertEqual(mgr.total_spawned, 0)
        self.assertEqual(len(mgr.get_snapshot().enemies), 0)
        self.assertEqual(mgr.interval_multiplier, 1.0)

    def test_reset_keeps_enemy_ids_unique_and_announces_itself(self):
        mgr = _manager()
        mgr.spawn_tick()
        before = set(mgr.get_snapshot().enemies)
        start = mgr.event_log.next_seq
        mgr.reset()
        mgr.spawn_tick()

        after = set(mgr.get_snapshot().enemies)
        self.assertEqual(len(after), 1)
        self.assertTrue(before.isdisjoint(after))
        self.assertGreater(min(after), max(before))

        kinds = [e.event.kind for e in mgr.event_log.since(start)]
        self.assertEqual(kinds[0], "field_reset")
        self.assertEqual(kinds[-1], "enemy_spawned")

    def test_background_timer_spawns(self):
        mgr = _manager(base_spawn_interval=0.01)
        mgr.start()
        try:
            deadline = time.monotonic() + 2.0
            while mgr.total_spawned < 3 and time.monotonic() < deadline:
                time.sleep(0.01)
        finally:
            mgr.stop()
        self.assertGreaterEqual(mgr.total_spawned, 3)
        self.assertFalse(mgr.running)


class TestStateRoutes:

    def test_state_payload(self):
        mgr = _manager()
        mgr.spawn_tick()
        resp = get_state(since=None, limit=100, manager=mgr)
        assert resp.spawn_count == 1
        assert len(resp.enemies) == 1
        assert resp.player.direction == "up"
        assert resp.events[-1].kind == "enemy_spawned"
        assert "enemy_id" in resp.events[-1].data
        assert resp.next_seq == mgr.event_log.next_seq

    def test_state_since(self):
        mgr = _manager()
        start = mgr.event_log.next_seq
        mgr.spawn_tick()
        resp = get_state(since=start, limit=100, manager=mgr)
        assert all(e.seq >= start for e in resp.events)
        assert resp.events

    def test_stats(self):
        mgr = _manager()
        mgr.spawn_tick()
        stats = get_stats(manager=mgr)
        assert stats.total_spawned == 1
        assert stats.enemy_count == 1
        assert stats.running is False


class TestMapRoute:

    def test_rle_roundtrip_total(self):
        assert rle_encode([]) == []
        assert rle_encode([0, 0, 1, 0]) == [0, 2, 1, 1, 0, 1]

    def test_map_geometry(self):
        mgr = _manager()
        resp = get_map(manager=mgr)
        assert (resp.width, resp.height, resp.cell_size) == (18, 12, 16)
        assert (resp.core_min_x, resp.core_max_x, resp.core_min_y, resp.core_max_y) == (7, 10, 4, 7)
        assert sum(resp.grid[1::2]) == 18 * 12
        # exactly one player cell
        player_cells = sum(count for kind, count in zip(resp.grid[::2], resp.grid[1::2]) if kind == 1)
        assert player_cells == 1


class TestInputRoutes:

    def test_move_then_busy(self):
        mgr = _manager()
        assert move(MoveDirection.left, manager=mgr).accepted
        assert not move(MoveDirection.left, manager=mgr).accepted
        assert not shoot(manager=mgr).accepted
        assert acknowledge(Acknowledgement.end_movement, manager=mgr).accepted
        assert shoot(manager=mgr).accepted

    def test_shot_response_has_target(self):
        mgr = _manager()
        resp = shoot(manager=mgr)
        snap = mgr.get_snapshot()
        assert resp.eliminated == 0
        assert (resp.target_x, resp.target_y) == (snap.player.pos.x, snap.player.pos.y)

    def test_out_of_order_ack_is_conflict(self):
        mgr = _manager()
        with pytest.raises(HTTPException) as exc:
            acknowledge(Acknowledgement.end_shoot, manager=mgr)
        assert exc.value.status_code == 409

    def test_full_shot_handshake(self):
        mgr = _manager()
        shoot(manager=mgr)
        acknowledge(Acknowledgement.return_to_position, manager=mgr)
        acknowledge(Acknowledgement.end_shoot, manager=mgr)
        assert not mgr.is_shooting()
        assert mgr.get_snapshot().player.direction == Direction.UP


class TestControlRoutes:

    def test_step_when_stopped_runs_inline(self):
        mgr = _manager()
        resp = control(ControlAction.step, manager=mgr)
        assert resp.status == "ok"
        assert mgr.total_spawned == 1

    def test_pause_when_not_running(self):
        resp = control(ControlAction.pause, manager=_manager())
        assert resp.status == "error"

    def test_reset(self):
        mgr = _manager()
        control(ControlAction.step, manager=mgr)
        resp = control(ControlAction.reset, manager=mgr)
        assert resp.spawn_count == 0

    def test_start_twice_is_noop(self):
        mgr = _manager(base_spawn_interval=5.0)
        try:
            assert control(ControlAction.start, manager=mgr).status == "ok"
            assert control(ControlAction.start, manager=mgr).status == "noop"
        finally:
            mgr.stop()


class TestConfigRoute:

    def test_config(self):
        mgr = _manager(seed=7)
        resp = get_config(manager=mgr)
        assert resp.seed == 7
        assert resp.core_size == 4
        assert resp.spawn_interval == resp.base_spawn_interval


class TestMetadataRoute:

    def test_enums_cover_every_definition(self):
        resp = get_enums()
        assert [c.name for c in resp.colors] == ["red", "green", "blue", "purple"]
        assert [k.name for k in resp.tile_kinds] == ["empty", "player", "enemy"]
        up = next(d for d in resp.directions if d.name == "up")
        assert (up.dx, up.dy) == (0, -1)

    def test_event_kinds_include_wire_names(self):
        kinds = get_enums().event_kinds
        for name in ("enemy_spawned", "enemy_moved", "enemy_removed", "player_shot_to", "field_reset"):
            assert name in kinds
        assert "event" not in kinds
