"""Persistence for drill attempts and per-branch progress."""

from typing import List

from poker_drill.models import DifficultyLevel, TrainingScenario
from poker_drill.storage.database import Database


class DrillRepository:
    """Repository for answered drills."""

    def __init__(self, db: Database):
        self.db = db

    def save_attempt(self, scenario: TrainingScenario, answer_id: str,
                     is_correct: bool,
                     difficulty: DifficultyLevel = DifficultyLevel.BEGINNER) -> int:
        """Record one answered scenario.

        Args:
            scenario: The scenario that was answered.
            answer_id: The id the player chose.
            is_correct: Whether the choice was the correct one.
            difficulty: Difficulty the scenario was generated at.

        Returns:
            Row id of the stored attempt.
        """
        with self.db.connect() as conn:
            cursor = conn.execute(
                """INSERT INTO attempts
                (scenario_id, topic, branch_key, difficulty, answer_id,
                 correct_id, is_correct)
                VALUES (?, ?, ?, ?, ?, ?, ?)""",
                (scenario.scenario_id, scenario.topic.value, scenario.branch_key,
                 difficulty.value, answer_id.upper(), scenario.correct_answer.id,
                 int(is_correct)),
            )
            return cursor.lastrowid

    def get_attempts(self, limit: int = 50) -> List[dict]:
        """Get the most recent attempts, newest first."""
        with self.db.connect() as conn:
            rows = conn.execute(
                "SELECT * FROM attempts ORDER BY id DESC LIMIT ?",
                (limit,),
            ).fetchall()
            return [dict(r) for r in rows]

    def get_attempt_count(self) -> int:
        with self.db.connect() as conn:
            row = conn.execute("SELECT COUNT(*) as cnt FROM attempts").fetchone()
            return row["cnt"]

    def get_progress(self) -> List[dict]:
        """Accuracy per (topic, branch_key), weakest branches first."""
        with self.db.connect() as conn:
            rows = conn.execute(
                """SELECT topic, branch_key,
                          COUNT(*) AS attempts,
                          SUM(is_correct) AS correct
                   FROM attempts
                   GROUP BY topic, branch_key"""
            ).fetchall()
        progress = [self._with_accuracy(dict(r)) for r in rows]
        progress.sort(key=lambda p: (p["accuracy"], p["topic"], p["branch_key"]))
        return progress

    def get_topic_summary(self) -> List[dict]:
        """Accuracy per topic, in topic name order."""
        with self.db.connect() as conn:
            rows = conn.execute(
                """SELECT topic,
                          COUNT(*) AS attempts,
                          SUM(is_correct) AS correct,
                          COUNT(DISTINCT branch_key) AS branches
                   FROM attempts
                   GROUP BY topic
                   ORDER BY topic"""
            ).fetchall()
        return [self._with_accuracy(dict(r)) for r in rows]

    @staticmethod
    def _with_accuracy(row: dict) -> dict:
        row["correct"] = row["correct"] or 0
        row["accuracy"] = row["correct"] / row["attempts"] if row["attempts"] else 0.0
        return row
