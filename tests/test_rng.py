"""Tests for the domain-separated deterministic RNG."""

from __future__ import annotations

import unittest

from goopfield.core.enums import Color, Domain
from goopfield.systems.rng import DeterministicRNG


class TestDeterministicRNG(unittest.TestCase):

    def test_same_inputs_same_output(self):
        a = DeterministicRNG(7)
        b = DeterministicRNG(7)
        for key in range(50):
            self.assertEqual(a.next_float(Domain.SPAWN, key), b.next_float(Domain.SPAWN, key))

    def test_seed_changes_stream(self):
        a = [DeterministicRNG(1).next_float(Domain.COLOR, k) for k in range(20)]
        b = [DeterministicRNG(2).next_float(Domain.COLOR, k) for k in range(20)]
        self.assertNotEqual(a, b)

    def test_domains_are_separated(self):
        rng = DeterministicRNG(3)
        a = [rng.next_float(Domain.SPAWN, k) for k in range(20)]
        b = [rng.next_float(Domain.COLOR, k) for k in range(20)]
        self.assertNotEqual(a, b)

    def test_next_int_inclusive_range(self):
        rng = DeterministicRNG(11)
        values = {rng.next_int(Domain.PLAYER, k, 0, 7, 10) for k in range(400)}
        self.assertEqual(values, {7, 8, 9, 10})

    def test_float_range(self):
        rng = DeterministicRNG(5)
        for k in range(200):
            f = rng.next_float(Domain.POLICY, k)
            self.assertGreaterEqual(f, 0.0)
            self.assertLess(f, 1.0)

    def test_colors_cover_palette(self):
        rng = DeterministicRNG(9)
        colors = {rng.next_color(Domain.COLOR, k) for k in range(400)}
        self.assertEqual(colors, set(Color))

    def test_choice_of_empty_sequence(self):
        with self.assertRaises(IndexError):
            DeterministicRNG(0).choice([], Domain.SPAWN, 0)
