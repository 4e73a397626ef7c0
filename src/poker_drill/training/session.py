"""Drill session with dynamic difficulty adjustment."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from poker_drill.engine.generator import generate_training, make_rng
from poker_drill.models import (
    DifficultyLevel, TextStyle, TopicSelector, TrainingRequest,
    TrainingScenario, TrainingTopic,
)
from poker_drill.storage.repository import DrillRepository
from poker_drill.training.service import AnswerResult, grade

logger = logging.getLogger(__name__)

_LEVELS = (
    DifficultyLevel.BEGINNER,
    DifficultyLevel.INTERMEDIATE,
    DifficultyLevel.ADVANCED,
)


@dataclass(frozen=True)
class SessionRecord:
    scenario_id: str
    topic: TrainingTopic
    branch_key: str
    difficulty: DifficultyLevel
    answer_id: str
    is_correct: bool


class DrillSession:
    """Runs a series of drills for one player.

    Workflow:
    1. Draw the next scenario for the selector at the current difficulty
    2. Grade the player's answer
    3. Adjust difficulty based on performance
    4. Save the attempt for progress tracking
    """

    def __init__(self, selector: Optional[TopicSelector] = None,
                 difficulty: DifficultyLevel = DifficultyLevel.BEGINNER,
                 text_style: TextStyle = TextStyle.SIMPLE,
                 repository: Optional[DrillRepository] = None,
                 seed: Optional[int] = None,
                 adaptive: bool = True):
        self.selector = selector
        self.current_difficulty = difficulty
        self.text_style = text_style
        self.repository = repository
        self.adaptive = adaptive
        self._rng = make_rng(seed)
        self.correct_count = 0
        self.total_count = 0
        self.history: List[SessionRecord] = []

    def next_scenario(self) -> TrainingScenario:
        """Generate the next drill.

        With no selector, every topic is fair game. Each drill is seeded from
        the session's own RNG, so a seeded session replays exactly.
        """
        selector = self.selector
        if selector is None:
            selector = self._rng.choice(list(TrainingTopic))
        return generate_training(TrainingRequest(
            topic=selector,
            difficulty=self.current_difficulty,
            rng_seed=self._rng.getrandbits(64),
            text_style=self.text_style,
        ))

    def answer(self, scenario: TrainingScenario, answer_id: str) -> AnswerResult:
        """Grade an answer, record it and adjust difficulty.

        Raises:
            UnknownAnswerError: The scenario offers no such answer.
        """
        result = grade(scenario, answer_id)
        difficulty = self.current_difficulty

        self.history.append(SessionRecord(
            scenario_id=scenario.scenario_id,
            topic=scenario.topic,
            branch_key=scenario.branch_key,
            difficulty=difficulty,
            answer_id=answer_id.strip().upper(),
            is_correct=result.is_correct,
        ))
        if self.repository is not None:
            self.repository.save_attempt(scenario, answer_id, result.is_correct, difficulty)

        self.total_count += 1
        if result.is_correct:
            self.correct_count += 1
        if self.adaptive:
            self._adjust_difficulty()

        return result

    def summary(self) -> Dict[str, object]:
        """Totals for the whole session, plus a per-topic breakdown."""
        by_topic: Dict[str, Dict[str, int]] = {}
        for record in self.history:
            row = by_topic.setdefault(record.topic.display_name, {"attempts": 0, "correct": 0})
            row["attempts"] += 1
            row["correct"] += int(record.is_correct)

        attempts = len(self.history)
        correct = sum(1 for r in self.history if r.is_correct)
        return {
            "attempts": attempts,
            "correct": correct,
            "accuracy": correct / attempts if attempts else 0.0,
            "final_difficulty": self.current_difficulty,
            "topics": by_topic,
        }

    def _adjust_difficulty(self):
        """Adjust difficulty based on performance at the current level."""
        if self.total_count < 5:
            return

        accuracy = self.current_accuracy
        level = _LEVELS.index(self.current_difficulty)

        # Step up above 80% accuracy
        if accuracy > 0.8 and level < len(_LEVELS) - 1:
            self._change_difficulty(_LEVELS[level + 1])
        # Step down below 40%
        elif accuracy < 0.4 and level > 0:
            self._change_difficulty(_LEVELS[level - 1])

    def _change_difficulty(self, difficulty: DifficultyLevel):
        logger.info("Difficulty %s -> %s (accuracy %.0f%%)",
                    self.current_difficulty.value, difficulty.value,
                    self.current_accuracy * 100)
        self.current_difficulty = difficulty
        self._reset_counters()

    def _reset_counters(self):
        """Reset counters after difficulty change."""
        self.correct_count = 0
        self.total_count = 0

    @property
    def current_accuracy(self) -> float:
        """Accuracy at the current difficulty level."""
        if self.total_count == 0:
            return 0.0
        return self.correct_count / self.total_count
