"""Plain text formatting for terminal output."""

from typing import Dict, List

from poker_drill.models import Street, TrainingScenario, TrainingTopic
from poker_drill.training.service import AnswerResult


def cards_str(cards) -> str:
    return " ".join(c.to_pretty() for c in cards)


class TextFormatter:
    """Format drills as plain text for terminal display."""

    def format_scenario(self, scenario: TrainingScenario, reveal: bool = False) -> str:
        """Format a drill; with ``reveal`` the answer and explanations are shown."""
        setup = scenario.table_setup
        lines = []
        lines.append(f"=== {scenario.topic.display_name} [{scenario.scenario_id}] ===")
        lines.append(f"{setup.game_type.display_name}  |  "
                     f"Pot: {setup.pot_size}  |  To call: {setup.current_bet}")
        lines.append(f"Hero: {cards_str(setup.hero_hand)} ({setup.hero_position.value})")

        if setup.board:
            lines.append(f"Board: {cards_str(setup.board)}")

        lines.append("")
        for p in setup.players:
            tag = "  <- hero" if p.is_hero else ""
            lines.append(f"  Seat {p.seat}: {p.position.value:<6} {p.stack:>6}{tag}")

        lines.append("")
        lines.append(scenario.question)
        lines.append("")
        for a in scenario.answers:
            mark = "*" if reveal and a.is_correct else " "
            lines.append(f" {mark}{a.id}) {a.text}")

        if reveal:
            lines.append("")
            for a in scenario.answers:
                lines.append(f"  {a.id}: {a.explanation}")

        return "\n".join(lines)

    def format_answer_result(self, result: AnswerResult) -> str:
        verdict = "Correct!" if result.is_correct else f"Wrong. The answer was {result.correct_id}."
        return f"{verdict}\n{result.explanation}"

    def format_topics(self) -> str:
        """List every topic, grouped by street."""
        lines = ["=== Topics ==="]
        for street in Street:
            lines.append(f"\n  [{street.value.upper()}]")
            for topic in street.topics:
                lines.append(f"    {topic.prefix}  {topic.value:<26} {topic.display_name}")
        return "\n".join(lines)

    def format_progress(self, progress: List[Dict]) -> str:
        """Format per-branch accuracy rows from the repository."""
        if not progress:
            return "No drills answered yet."

        lines = ["=== Progress ===", ""]
        for row in progress:
            name = TrainingTopic(row["topic"]).display_name
            lines.append(f"  {name:<26} {row['branch_key']:<28} "
                         f"{row['correct']:>3}/{row['attempts']:<3} "
                         f"{row['accuracy'] * 100:5.1f}%")
        return "\n".join(lines)
