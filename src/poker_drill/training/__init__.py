"""Drill serving, grading and adaptive sessions."""

from poker_drill.training.cache import ScenarioCache
from poker_drill.training.service import AnswerResult, DrillService
from poker_drill.training.session import DrillSession

__all__ = ["ScenarioCache", "AnswerResult", "DrillService", "DrillSession"]
