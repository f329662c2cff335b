"""Engine systems: RNG, spawn selection, difficulty, scoring."""

from goopfield.systems.rng import DeterministicRNG
from goopfield.systems.spawn_selector import SpawnSelector
from goopfield.systems.difficulty import DifficultyController, ManualSpawnTimer, SpawnTimer
from goopfield.systems.scoring import Scoreboard, ScoreKeeper

__all__ = [
    "DeterministicRNG",
    "DifficultyController",
    "ManualSpawnTimer",
    "ScoreKeeper",
    "Scoreboard",
    "SpawnSelector",
    "SpawnTimer",
]
