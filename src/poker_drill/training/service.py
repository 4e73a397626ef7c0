"""Drill service: hand out scenarios and grade submitted answers."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from poker_drill.config import HERO_PLAYER_ID
from poker_drill.engine.generator import generate_training
from poker_drill.exceptions import ScenarioNotFoundError, UnknownAnswerError
from poker_drill.export.scenario import ScenarioExporter
from poker_drill.models import (
    DifficultyLevel, Street, TextStyle, TopicSelector, TrainingRequest,
    TrainingScenario, TrainingTopic, parse_selector,
)
from poker_drill.storage.repository import DrillRepository
from poker_drill.training.cache import ScenarioCache

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnswerResult:
    """Outcome of grading one answer."""
    is_correct: bool
    explanation: str
    correct_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_correct": self.is_correct,
            "explanation": self.explanation,
            "correct_id": self.correct_id,
        }


def grade(scenario: TrainingScenario, answer_id: str) -> AnswerResult:
    """Grade ``answer_id`` against a scenario.

    Raises:
        UnknownAnswerError: The scenario offers no such answer.
    """
    chosen = scenario.answer(answer_id)
    if chosen is None:
        raise UnknownAnswerError(
            f"Unknown answer {answer_id!r} for scenario {scenario.scenario_id}"
        )
    return AnswerResult(
        is_correct=chosen.is_correct,
        explanation=chosen.explanation,
        correct_id=scenario.correct_answer.id,
    )


class DrillService:
    """Generates drills for a client and checks the answers it sends back.

    The client only ever sees the public view of a scenario; the full
    scenario stays in the cache until the answer is submitted.
    """

    def __init__(self, cache: Optional[ScenarioCache] = None,
                 repository: Optional[DrillRepository] = None,
                 hero_player_id: int = HERO_PLAYER_ID):
        self.cache = cache if cache is not None else ScenarioCache()
        self.repository = repository
        self.hero_player_id = hero_player_id

    def new_drill(self, topic: Union[TopicSelector, str],
                  difficulty: Union[DifficultyLevel, str] = DifficultyLevel.BEGINNER,
                  text_style: Union[TextStyle, str] = TextStyle.SIMPLE,
                  seed: Optional[int] = None) -> Dict[str, Any]:
        """Generate a drill and cache it for grading.

        Args:
            topic: Topic or street, as an enum or its name.
            difficulty: Difficulty, as an enum or its name.
            text_style: Text style, as an enum or its name.
            seed: Optional seed; omitted means a fresh random scenario.

        Returns:
            Dict with ``table_state`` and the redacted ``drill``.

        Raises:
            InvalidSelectionError: A name did not match any topic, street,
                difficulty or style.
        """
        if not isinstance(topic, (TrainingTopic, Street)):
            topic = parse_selector(topic)
        if not isinstance(difficulty, DifficultyLevel):
            difficulty = DifficultyLevel.from_name(difficulty)
        if not isinstance(text_style, TextStyle):
            text_style = TextStyle.from_name(text_style)

        scenario = generate_training(TrainingRequest(
            topic=topic, difficulty=difficulty, rng_seed=seed, text_style=text_style,
        ))
        self.cache.put(scenario, difficulty)
        return {
            "table_state": ScenarioExporter.table_state(scenario, self.hero_player_id),
            "drill": ScenarioExporter.public_view(scenario),
        }

    def submit_answer(self, scenario_id: str, answer_id: str) -> AnswerResult:
        """Grade an answer for a previously issued drill.

        Raises:
            ScenarioNotFoundError: The id was never issued or has been evicted.
            UnknownAnswerError: The scenario offers no such answer.
        """
        cached = self.cache.get(scenario_id)
        if cached is None:
            logger.warning("Answer for unknown or expired scenario %s", scenario_id)
            raise ScenarioNotFoundError("Scenario not found or expired")

        result = grade(cached.scenario, answer_id)
        if self.repository is not None:
            self.repository.save_attempt(
                cached.scenario, answer_id, result.is_correct, cached.difficulty,
            )
        return result
