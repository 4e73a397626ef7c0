"""Data models for poker drills."""

from poker_drill.models.card import Card, Rank, Suit
from poker_drill.models.position import Position
from poker_drill.models.training import (
    GameType, DifficultyLevel, TextStyle, Street, TrainingTopic,
    TopicSelector, TrainingRequest, PlayerState, TableSetup,
    AnswerOption, TrainingScenario, parse_selector,
)

__all__ = [
    "Card", "Rank", "Suit",
    "Position",
    "GameType", "DifficultyLevel", "TextStyle", "Street", "TrainingTopic",
    "TopicSelector", "TrainingRequest", "PlayerState", "TableSetup",
    "AnswerOption", "TrainingScenario", "parse_selector",
]
