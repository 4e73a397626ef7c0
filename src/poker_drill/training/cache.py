"""Bounded in-memory store of generated scenarios, keyed by scenario id."""

import logging
import threading
from dataclasses import dataclass
from typing import Dict, Optional

from poker_drill.config import CACHE_CAPACITY
from poker_drill.models import DifficultyLevel, TrainingScenario

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CachedScenario:
    scenario: TrainingScenario
    difficulty: DifficultyLevel


class ScenarioCache:
    """Thread-safe scenario store with oldest-first eviction.

    Scenarios are kept until an answer arrives; once ``capacity`` is reached
    each insert drops the oldest entry.
    """

    def __init__(self, capacity: int = CACHE_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: Dict[str, CachedScenario] = {}
        self._lock = threading.Lock()

    def put(self, scenario: TrainingScenario,
            difficulty: DifficultyLevel = DifficultyLevel.BEGINNER):
        """Store a scenario under its id, evicting the oldest entry when full."""
        with self._lock:
            if scenario.scenario_id not in self._entries and len(self._entries) >= self.capacity:
                evicted = next(iter(self._entries))
                del self._entries[evicted]
                logger.debug("Evicted scenario %s (capacity %d)", evicted, self.capacity)
            self._entries[scenario.scenario_id] = CachedScenario(scenario, difficulty)

    def get(self, scenario_id: str) -> Optional[CachedScenario]:
        with self._lock:
            return self._entries.get(scenario_id)

    def clear(self):
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, scenario_id: str) -> bool:
        with self._lock:
            return scenario_id in self._entries
