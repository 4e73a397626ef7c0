"""Poker Drill - deterministic poker training scenario generator."""

__version__ = "0.1.0"

from poker_drill.engine.generator import generate_training
from poker_drill.models import (
    DifficultyLevel, Street, TextStyle, TrainingRequest, TrainingScenario,
    TrainingTopic,
)

__all__ = [
    "generate_training",
    "DifficultyLevel", "Street", "TextStyle", "TrainingRequest",
    "TrainingScenario", "TrainingTopic",
]
