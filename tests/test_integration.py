"""End-to-end integration tests.

Tests the full pipeline: generate → serve → answer → store → progress → format.
"""

import os
import tempfile

import pytest
from rich.console import Console

from poker_drill.formatters.table import TableFormatter
from poker_drill.formatters.text import TextFormatter
from poker_drill.models import DifficultyLevel, Street, TextStyle, TrainingTopic
from poker_drill.storage.database import Database
from poker_drill.storage.repository import DrillRepository
from poker_drill.training import DrillService, DrillSession


@pytest.fixture
def db():
    """Create a temporary database for testing."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    database = Database(path)
    yield database
    os.unlink(path)


@pytest.fixture
def repo(db):
    return DrillRepository(db)


class TestFullPipeline:
    def test_service_round_trip(self, repo):
        service = DrillService(repository=repo)
        for topic in TrainingTopic:
            drill = service.new_drill(topic, DifficultyLevel.ADVANCED, TextStyle.TECHNICAL, seed=17)
            scenario_id = drill["drill"]["scenario_id"]
            scenario = service.cache.get(scenario_id).scenario
            result = service.submit_answer(scenario_id, scenario.correct_answer.id)
            assert result.is_correct

        assert repo.get_attempt_count() == len(TrainingTopic)
        summary = repo.get_topic_summary()
        assert len(summary) == len(TrainingTopic)
        assert all(row["accuracy"] == 1.0 for row in summary)

    def test_session_to_progress(self, repo):
        session = DrillSession(selector=Street.FLOP, repository=repo, seed=99)
        for i in range(12):
            scenario = session.next_scenario()
            wrong = next(a.id for a in scenario.answers if not a.is_correct)
            session.answer(scenario, wrong if i % 3 == 0 else scenario.correct_answer.id)

        progress = repo.get_progress()
        assert sum(row["attempts"] for row in progress) == 12
        assert sum(row["correct"] for row in progress) == 8
        assert all(TrainingTopic(row["topic"]).street == Street.FLOP for row in progress)
        accuracies = [row["accuracy"] for row in progress]
        assert accuracies == sorted(accuracies)

    def test_progress_formatting(self, repo):
        session = DrillSession(selector=TrainingTopic.TURN_PROBE_BET, repository=repo, seed=5)
        for _ in range(3):
            scenario = session.next_scenario()
            session.answer(scenario, "A")

        text = TextFormatter().format_progress(repo.get_progress())
        assert "Turn Probe Bet" in text

        console = Console(record=True, width=200)
        fmt = TableFormatter(console)
        fmt.print_topic_summary(repo.get_topic_summary())
        fmt.print_progress(repo.get_progress())
        fmt.print_session_summary(session.summary())
        out = console.export_text()
        assert "Progress by Topic" in out
        assert "Progress by Branch" in out
        assert "Session Summary" in out
