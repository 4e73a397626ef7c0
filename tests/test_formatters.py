"""Tests for text and Rich output formatting."""

import pytest
from rich.console import Console

from poker_drill.engine.generator import generate_training
from poker_drill.formatters import TableFormatter, TextFormatter
from poker_drill.models import DifficultyLevel, TrainingRequest, TrainingTopic
from poker_drill.training.service import AnswerResult


@pytest.fixture
def scenario():
    return generate_training(TrainingRequest(topic=TrainingTopic.RIVER_CALL_OR_FOLD, rng_seed=21))


def recording_console():
    return Console(record=True, width=200, force_terminal=False)


class TestTextFormatter:
    def test_format_scenario(self, scenario):
        text = TextFormatter().format_scenario(scenario)
        assert scenario.scenario_id in text
        assert "River Call or Fold" in text
        assert scenario.question in text
        for a in scenario.answers:
            assert f"{a.id}) {a.text}" in text
        assert scenario.correct_answer.explanation not in text
        assert "Board:" in text

    def test_reveal(self, scenario):
        text = TextFormatter().format_scenario(scenario, reveal=True)
        correct = scenario.correct_answer
        assert f"*{correct.id}) {correct.text}" in text
        assert correct.explanation in text

    def test_preflop_has_no_board(self):
        s = generate_training(TrainingRequest(topic=TrainingTopic.SQUEEZE_PLAY, rng_seed=2))
        assert "Board:" not in TextFormatter().format_scenario(s)

    def test_answer_result(self):
        fmt = TextFormatter()
        assert fmt.format_answer_result(AnswerResult(True, "Nice.", "B")).startswith("Correct!")
        wrong = fmt.format_answer_result(AnswerResult(False, "No.", "C"))
        assert "The answer was C" in wrong
        assert wrong.endswith("No.")

    def test_topics(self):
        text = TextFormatter().format_topics()
        for topic in TrainingTopic:
            assert topic.value in text
        assert "[PREFLOP]" in text and "[RIVER]" in text

    def test_progress(self):
        fmt = TextFormatter()
        assert fmt.format_progress([]) == "No drills answered yet."
        text = fmt.format_progress([{
            "topic": "SqueezePlay", "branch_key": "Weak:Fold",
            "attempts": 4, "correct": 1, "accuracy": 0.25,
        }])
        assert "Squeeze Play" in text
        assert "Weak:Fold" in text
        assert "25.0%" in text


class TestTableFormatter:
    def test_print_scenario(self, scenario):
        console = recording_console()
        TableFormatter(console).print_scenario(scenario, reveal=True)
        out = console.export_text()
        assert scenario.scenario_id in out
        assert scenario.question in out
        assert scenario.correct_answer.explanation in out

    def test_print_topics(self):
        console = recording_console()
        TableFormatter(console).print_topics()
        out = console.export_text()
        assert "Training Topics" in out
        assert "ThreeBetPotCbet" in out

    def test_print_progress(self):
        console = recording_console()
        fmt = TableFormatter(console)
        fmt.print_progress([])
        assert "No drills answered yet" in console.export_text()

        fmt.print_progress([{
            "topic": "BluffSpot", "branch_key": "CappedRange",
            "attempts": 2, "correct": 2, "accuracy": 1.0,
        }])
        out = console.export_text()
        assert "Bluff Spot" in out
        assert "100.0%" in out

    def test_print_topic_summary(self):
        console = recording_console()
        TableFormatter(console).print_topic_summary([{
            "topic": "DelayedCbet", "branches": 3, "attempts": 5, "correct": 2, "accuracy": 0.4,
        }])
        out = console.export_text()
        assert "Delayed C-Bet" in out
        assert "40.0%" in out

    def test_print_answer_result(self):
        console = recording_console()
        TableFormatter(console).print_answer_result(AnswerResult(False, "Too loose.", "A"))
        out = console.export_text()
        assert "answer was A" in out
        assert "Too loose." in out

    def test_print_session_summary(self):
        console = recording_console()
        TableFormatter(console).print_session_summary({
            "attempts": 4, "correct": 3, "accuracy": 0.75,
            "final_difficulty": DifficultyLevel.INTERMEDIATE,
            "topics": {"Squeeze Play": {"attempts": 4, "correct": 3}},
        })
        out = console.export_text()
        assert "Session Summary" in out
        assert "75.0%" in out
        assert "Intermediate" in out
