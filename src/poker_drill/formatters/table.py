"""Rich table formatting for terminal output."""

from typing import Dict, List

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text

from poker_drill.models import Street, TrainingScenario, TrainingTopic
from poker_drill.formatters.text import cards_str
from poker_drill.training.service import AnswerResult


def _accuracy_style(accuracy: float) -> str:
    if accuracy >= 0.8:
        return "green"
    if accuracy >= 0.5:
        return "yellow"
    return "red"


class TableFormatter:
    """Format drills and progress as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def print_scenario(self, scenario: TrainingScenario, reveal: bool = False) -> None:
        """Print a drill as a table panel plus its answer options."""
        setup = scenario.table_setup

        header = Text()
        header.append(f"{setup.game_type.display_name}  ", style="dim")
        header.append(f"Pot {setup.pot_size}", style="bold")
        if setup.current_bet:
            header.append(f"  To call {setup.current_bet}", style="bold yellow")
        header.append("\nHero: ")
        header.append(cards_str(setup.hero_hand), style="bold cyan")
        header.append(f" ({setup.hero_position.display_name})")
        if setup.board:
            header.append("\nBoard: ")
            header.append(cards_str(setup.board), style="bold")

        self.console.print(Panel(
            header,
            title=f"{scenario.topic.display_name} [dim]{scenario.scenario_id}[/dim]",
            border_style="blue",
        ))

        seats = Table(show_header=True, box=None)
        seats.add_column("Seat", justify="right", style="dim")
        seats.add_column("Position", style="cyan")
        seats.add_column("Stack", justify="right")
        for p in setup.players:
            style = "bold green" if p.is_hero else ""
            seats.add_row(str(p.seat), p.position.value, str(p.stack), style=style)
        self.console.print(seats)

        self.console.print(f"\n[bold]{scenario.question}[/bold]\n")
        for a in scenario.answers:
            if reveal and a.is_correct:
                self.console.print(f"  [green]{a.id}) {a.text}[/green]")
            else:
                self.console.print(f"  {a.id}) {a.text}")

        if reveal:
            self.console.print()
            for a in scenario.answers:
                style = "green" if a.is_correct else "dim"
                self.console.print(f"  [{style}]{a.id}: {a.explanation}[/{style}]")

    def print_answer_result(self, result: AnswerResult) -> None:
        if result.is_correct:
            title, style = "Correct", "green"
        else:
            title, style = f"Wrong - answer was {result.correct_id}", "red"
        self.console.print(Panel(result.explanation, title=title, border_style=style))

    def print_topics(self) -> None:
        """Print every topic with its street and id prefix."""
        table = Table(title="Training Topics")
        table.add_column("Prefix", style="dim")
        table.add_column("Topic", style="cyan")
        table.add_column("Name")
        table.add_column("Street")

        for street in Street:
            for topic in street.topics:
                table.add_row(topic.prefix, topic.value, topic.display_name, street.value)

        self.console.print(table)

    def print_progress(self, progress: List[Dict]) -> None:
        """Print per-branch accuracy, weakest branches first."""
        if not progress:
            self.console.print("[dim]No drills answered yet. Run 'drill' or 'train' first.[/dim]")
            return

        table = Table(title="Progress by Branch")
        table.add_column("Topic", style="cyan")
        table.add_column("Branch")
        table.add_column("Correct", justify="right")
        table.add_column("Attempts", justify="right")
        table.add_column("Accuracy", justify="right")

        for row in progress:
            style = _accuracy_style(row["accuracy"])
            table.add_row(
                TrainingTopic(row["topic"]).display_name,
                row["branch_key"],
                str(row["correct"]),
                str(row["attempts"]),
                f"[{style}]{row['accuracy'] * 100:.1f}%[/{style}]",
            )

        self.console.print(table)

    def print_topic_summary(self, summary: List[Dict]) -> None:
        if not summary:
            return

        table = Table(title="Progress by Topic")
        table.add_column("Topic", style="cyan")
        table.add_column("Branches", justify="right")
        table.add_column("Attempts", justify="right")
        table.add_column("Accuracy", justify="right")

        for row in summary:
            style = _accuracy_style(row["accuracy"])
            table.add_row(
                TrainingTopic(row["topic"]).display_name,
                str(row["branches"]),
                str(row["attempts"]),
                f"[{style}]{row['accuracy'] * 100:.1f}%[/{style}]",
            )

        self.console.print(table)

    def print_session_summary(self, summary: Dict) -> None:
        """Print the totals of a finished training session."""
        attempts = summary["attempts"]
        if not attempts:
            self.console.print("[dim]No drills answered.[/dim]")
            return

        accuracy = summary["accuracy"]
        style = _accuracy_style(accuracy)
        self.console.print(Panel(
            f"Answered: {attempts}  |  Correct: {summary['correct']}  |  "
            f"Accuracy: [{style}]{accuracy * 100:.1f}%[/{style}]\n"
            f"Final difficulty: {summary['final_difficulty'].value}",
            title="Session Summary",
            border_style=style,
        ))

        table = Table(show_header=True)
        table.add_column("Topic", style="cyan")
        table.add_column("Correct", justify="right")
        table.add_column("Attempts", justify="right")
        for name, row in summary["topics"].items():
            table.add_row(name, str(row["correct"]), str(row["attempts"]))
        self.console.print(table)
