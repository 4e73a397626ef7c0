"""Tests for attempt persistence and progress queries."""

import sqlite3

import pytest

from poker_drill.engine.generator import generate_training
from poker_drill.exceptions import SchemaVersionError
from poker_drill.models import DifficultyLevel, TrainingRequest, TrainingTopic
from poker_drill.storage import Database, DrillRepository
from poker_drill.storage.database import SCHEMA_VERSION


@pytest.fixture
def repo(tmp_path):
    return DrillRepository(Database(tmp_path / "drills.db"))


def make(topic, seed):
    return generate_training(TrainingRequest(topic=topic, rng_seed=seed))


class TestDrillRepository:
    def test_save_and_count(self, repo):
        s = make(TrainingTopic.SQUEEZE_PLAY, 1)
        row_id = repo.save_attempt(s, "a", True, DifficultyLevel.ADVANCED)
        assert row_id > 0
        assert repo.get_attempt_count() == 1

        attempt = repo.get_attempts()[0]
        assert attempt["scenario_id"] == s.scenario_id
        assert attempt["topic"] == "SqueezePlay"
        assert attempt["branch_key"] == s.branch_key
        assert attempt["answer_id"] == "A"
        assert attempt["correct_id"] == s.correct_answer.id
        assert attempt["difficulty"] == "Advanced"
        assert attempt["is_correct"] == 1

    def test_attempts_newest_first(self, repo):
        first = make(TrainingTopic.BLUFF_SPOT, 1)
        second = make(TrainingTopic.BLUFF_SPOT, 2)
        repo.save_attempt(first, "A", False)
        repo.save_attempt(second, "B", True)
        ids = [a["scenario_id"] for a in repo.get_attempts(limit=10)]
        assert ids == [second.scenario_id, first.scenario_id]
        assert len(repo.get_attempts(limit=1)) == 1

    def test_progress_per_branch(self, repo):
        s = make(TrainingTopic.RIVER_VALUE_BET, 3)
        repo.save_attempt(s, "A", True)
        repo.save_attempt(s, "B", False)
        other = make(TrainingTopic.ICM_AND_TOURNAMENT_DECISION, 3)
        repo.save_attempt(other, "A", True)

        progress = repo.get_progress()
        assert len(progress) == 2
        weakest = progress[0]
        assert weakest["topic"] == "RiverValueBet"
        assert weakest["branch_key"] == s.branch_key
        assert weakest["attempts"] == 2
        assert weakest["correct"] == 1
        assert weakest["accuracy"] == pytest.approx(0.5)
        assert progress[1]["accuracy"] == pytest.approx(1.0)

    def test_topic_summary(self, repo):
        for seed in range(6):
            s = make(TrainingTopic.POT_ODDS_AND_EQUITY, seed)
            repo.save_attempt(s, s.correct_answer.id, True)
        summary = repo.get_topic_summary()
        assert len(summary) == 1
        assert summary[0]["attempts"] == 6
        assert summary[0]["accuracy"] == pytest.approx(1.0)
        assert summary[0]["branches"] >= 1

    def test_empty(self, repo):
        assert repo.get_attempt_count() == 0
        assert repo.get_progress() == []
        assert repo.get_topic_summary() == []


class TestDatabase:
    def test_new_file_is_stamped(self, tmp_path):
        db = Database(tmp_path / "nested" / "drills.db")
        assert db.schema_version == SCHEMA_VERSION
        with db.connect() as conn:
            tables = {r["name"] for r in conn.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table'")}
        assert "attempts" in tables

    def test_reopen_keeps_attempts(self, tmp_path):
        path = tmp_path / "drills.db"
        DrillRepository(Database(path)).save_attempt(make(TrainingTopic.SQUEEZE_PLAY, 1), "A", True)
        reopened = DrillRepository(Database(path))
        assert reopened.get_attempt_count() == 1

    def test_newer_schema_rejected(self, tmp_path):
        path = tmp_path / "drills.db"
        conn = sqlite3.connect(str(path))
        conn.execute(f"PRAGMA user_version = {SCHEMA_VERSION + 1}")
        conn.commit()
        conn.close()
        with pytest.raises(SchemaVersionError):
            Database(path)
