"""Tests for the command line interface."""

import json
import sqlite3

import pytest
from typer.testing import CliRunner

from cli.main import app
from poker_drill.models import Street, TrainingTopic
from poker_drill.storage import Database, DrillRepository

runner = CliRunner()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "cli.db"


class TestTopics:
    def test_lists_topics(self):
        result = runner.invoke(app, ["topics"])
        assert result.exit_code == 0
        assert "Training Topics" in result.output
        assert "Squeeze" in result.output


class TestDrill:
    def test_json(self):
        result = runner.invoke(app, ["drill", "--topic", "SqueezePlay", "--seed", "1", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["scenario_id"].startswith("SQ-")
        assert all("is_correct" not in a for a in data["answers"])

    def test_json_reveal_is_reproducible(self):
        args = ["drill", "--topic", "BluffSpot", "--seed", "4004",
                "--difficulty", "intermediate", "--json", "--reveal"]
        first = json.loads(runner.invoke(app, args).output)
        second = json.loads(runner.invoke(app, args).output)
        assert first == second
        assert len(first["table_setup"]["board"]) == 5
        assert sum(a["is_correct"] for a in first["answers"]) == 1

    def test_street_selector(self):
        result = runner.invoke(app, ["drill", "--street", "turn", "--seed", "8", "--json", "--reveal"])
        assert result.exit_code == 0
        topic = TrainingTopic(json.loads(result.output)["topic"])
        assert topic in Street.TURN.topics

    def test_pretty_output(self):
        result = runner.invoke(app, ["drill", "--topic", "CheckRaiseSpot", "--seed", "2", "--reveal"])
        assert result.exit_code == 0
        assert "Check-Raise Spot" in result.output

    def test_unknown_topic(self):
        result = runner.invoke(app, ["drill", "--topic", "showdown"])
        assert result.exit_code == 1
        assert "Unknown" in result.output

    def test_unknown_difficulty(self):
        result = runner.invoke(app, ["drill", "--difficulty", "expert"])
        assert result.exit_code == 1

    def test_answer_is_recorded(self, db_path):
        result = runner.invoke(app, ["drill", "--topic", "RiverValueBet", "--seed", "3",
                                     "--answer", "A", "--db", str(db_path)])
        assert result.exit_code == 0
        assert DrillRepository(Database(db_path)).get_attempt_count() == 1

    def test_unknown_answer(self, db_path):
        result = runner.invoke(app, ["drill", "--topic", "RiverValueBet", "--seed", "3",
                                     "--answer", "Z", "--db", str(db_path)])
        assert result.exit_code == 1


class TestTrain:
    def test_session(self, db_path):
        result = runner.invoke(
            app,
            ["train", "--topic", "SqueezePlay", "--count", "2", "--seed", "3", "--db", str(db_path)],
            input="A\nB\n",
        )
        assert result.exit_code == 0
        assert "Session Summary" in result.output
        assert DrillRepository(Database(db_path)).get_attempt_count() == 2

    def test_reprompts_on_invalid_answer(self, db_path):
        result = runner.invoke(
            app, ["train", "--count", "1", "--seed", "1", "--db", str(db_path)],
            input="X\nA\n",
        )
        assert result.exit_code == 0
        assert "Choose one of" in result.output
        assert DrillRepository(Database(db_path)).get_attempt_count() == 1

    def test_skip(self, db_path):
        result = runner.invoke(
            app, ["train", "--count", "2", "--seed", "4", "--db", str(db_path)],
            input="s\nA\n",
        )
        assert result.exit_code == 0
        assert "Skipped" in result.output
        assert DrillRepository(Database(db_path)).get_attempt_count() == 1

    def test_quit(self, db_path):
        result = runner.invoke(app, ["train", "--count", "3", "--db", str(db_path)], input="q\n")
        assert result.exit_code == 0
        assert "Training session ended" in result.output
        assert DrillRepository(Database(db_path)).get_attempt_count() == 0


class TestProgress:
    def test_empty(self, db_path):
        result = runner.invoke(app, ["progress", "--db", str(db_path)])
        assert result.exit_code == 0
        assert "No drills answered yet" in result.output

    def test_after_drills(self, db_path):
        runner.invoke(app, ["drill", "--topic", "BigBlindDefense", "--seed", "5",
                            "--answer", "B", "--db", str(db_path)])
        result = runner.invoke(app, ["progress", "--db", str(db_path)])
        assert result.exit_code == 0
        assert "Big Blind Defense" in result.output

    def test_newer_database_rejected(self, db_path):
        conn = sqlite3.connect(str(db_path))
        conn.execute("PRAGMA user_version = 99")
        conn.commit()
        conn.close()
        result = runner.invoke(app, ["progress", "--db", str(db_path)])
        assert result.exit_code == 1


class TestExport:
    def test_export(self, tmp_path):
        out = tmp_path / "drills.json"
        result = runner.invoke(app, ["export", str(out), "--topic", "flop",
                                     "--count", "3", "--seed", "1"])
        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert len(data) == 3
        assert all(TrainingTopic(d["topic"]) in Street.FLOP.topics for d in data)
        assert all("explanation" in a for d in data for a in d["answers"])
