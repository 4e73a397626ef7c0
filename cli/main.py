"""Poker Drill CLI - Typer-based command line interface."""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

app = typer.Typer(
    name="poker-drill",
    help="Texas Hold'em strategy drills",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Texas Hold'em strategy drills."""
    from rich.logging import RichHandler
    from poker_drill import config

    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _get_repo(db_path: Optional[Path] = None):
    from poker_drill.exceptions import SchemaVersionError
    from poker_drill.storage import Database, DrillRepository

    try:
        return DrillRepository(Database(db_path))
    except SchemaVersionError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _parse_options(topic: Optional[str], difficulty: Optional[str], style: Optional[str]):
    """Resolve CLI names into a selector, difficulty and style, or exit."""
    from poker_drill import config
    from poker_drill.exceptions import InvalidSelectionError
    from poker_drill.models import DifficultyLevel, TextStyle, parse_selector

    try:
        selector = parse_selector(topic) if topic else None
        level = DifficultyLevel.from_name(difficulty or config.DEFAULT_DIFFICULTY)
        text_style = TextStyle.from_name(style or config.DEFAULT_TEXT_STYLE)
    except InvalidSelectionError as e:
        console.print(f"[red]{e}[/red]")
        console.print("Run [cyan]poker-drill topics[/cyan] to list valid topics.")
        raise typer.Exit(1)
    return selector, level, text_style


_TOPIC_HELP = "Topic or street name, e.g. SqueezePlay or river (default: any)"
_DIFFICULTY_HELP = "Beginner | Intermediate | Advanced"
_STYLE_HELP = "Simple | Technical"


@app.command()
def topics():
    """List all training topics."""
    from poker_drill.formatters.table import TableFormatter

    TableFormatter(console).print_topics()


@app.command()
def drill(
    topic: Optional[str] = typer.Option(None, "--topic", "--street", "-t", help=_TOPIC_HELP),
    difficulty: Optional[str] = typer.Option(None, "--difficulty", "-d", help=_DIFFICULTY_HELP),
    style: Optional[str] = typer.Option(None, "--style", help=_STYLE_HELP),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible drill"),
    answer: Optional[str] = typer.Option(None, "--answer", "-a",
                                         help="Grade this answer id and record it"),
    reveal: bool = typer.Option(False, "--reveal", help="Show the answer and explanations"),
    as_json: bool = typer.Option(False, "--json", help="Print the drill as JSON"),
    db: Optional[Path] = typer.Option(None, "--db", help="Database path"),
):
    """Generate a single drill."""
    from poker_drill.engine.generator import generate_training, make_rng
    from poker_drill.exceptions import UnknownAnswerError
    from poker_drill.export.scenario import ScenarioExporter
    from poker_drill.formatters.table import TableFormatter
    from poker_drill.models import TrainingRequest, TrainingTopic
    from poker_drill.training.service import grade

    selector, level, text_style = _parse_options(topic, difficulty, style)
    if selector is None:
        selector = make_rng(seed).choice(list(TrainingTopic))

    scenario = generate_training(TrainingRequest(
        topic=selector, difficulty=level, rng_seed=seed, text_style=text_style,
    ))

    if as_json:
        data = ScenarioExporter.to_dict(scenario) if reveal else ScenarioExporter.public_view(scenario)
        typer.echo(json.dumps(data, indent=2))
        return

    fmt = TableFormatter(console)
    fmt.print_scenario(scenario, reveal=reveal)

    if answer:
        try:
            result = grade(scenario, answer)
        except UnknownAnswerError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)
        _get_repo(db).save_attempt(scenario, answer, result.is_correct, level)
        fmt.print_answer_result(result)


@app.command()
def train(
    topic: Optional[str] = typer.Option(None, "--topic", "--street", "-t", help=_TOPIC_HELP),
    count: Optional[int] = typer.Option(None, "--count", "-n", help="Number of drills"),
    difficulty: Optional[str] = typer.Option(None, "--difficulty", "-d", help=_DIFFICULTY_HELP),
    style: Optional[str] = typer.Option(None, "--style", help=_STYLE_HELP),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible session"),
    fixed: bool = typer.Option(False, "--fixed", help="Keep difficulty fixed"),
    db: Optional[Path] = typer.Option(None, "--db", help="Database path"),
):
    """Start an interactive training session."""
    from poker_drill import config
    from poker_drill.formatters.table import TableFormatter
    from poker_drill.training.session import DrillSession

    selector, level, text_style = _parse_options(topic, difficulty, style)
    total = count or config.DEFAULT_DRILL_COUNT

    session = DrillSession(
        selector=selector,
        difficulty=level,
        text_style=text_style,
        repository=_get_repo(db),
        seed=seed,
        adaptive=not fixed,
    )
    fmt = TableFormatter(console)

    for i in range(1, total + 1):
        scenario = session.next_scenario()
        console.print(f"\n[bold cyan]===  Drill {i}/{total}  "
                      f"({session.current_difficulty.value})  ===[/bold cyan]\n")
        fmt.print_scenario(scenario)
        console.print("  [cyan]s.[/cyan] [dim]Skip this drill[/dim]")
        console.print("  [cyan]q.[/cyan] [dim]Quit training[/dim]")

        choice = typer.prompt("\nYour answer").strip()
        while choice.lower() not in ("q", "s") and scenario.answer(choice) is None:
            valid = ", ".join(a.id for a in scenario.answers)
            choice = typer.prompt(f"Choose one of {valid}, s or q").strip()

        if choice.lower() == "q":
            console.print("\n[dim]Training session ended.[/dim]")
            break
        if choice.lower() == "s":
            console.print("[dim]Skipped.[/dim]")
            continue

        fmt.print_answer_result(session.answer(scenario, choice))

    console.print()
    fmt.print_session_summary(session.summary())
    console.print("\nUse [cyan]poker-drill progress[/cyan] to view your history.")


@app.command()
def progress(
    db: Optional[Path] = typer.Option(None, "--db", help="Database path"),
):
    """View accuracy per topic and branch."""
    from poker_drill.formatters.table import TableFormatter

    repo = _get_repo(db)
    fmt = TableFormatter(console)
    fmt.print_topic_summary(repo.get_topic_summary())
    fmt.print_progress(repo.get_progress())


@app.command()
def export(
    output: Path = typer.Argument(..., help="Output JSON file"),
    topic: Optional[str] = typer.Option(None, "--topic", "--street", "-t", help=_TOPIC_HELP),
    count: int = typer.Option(10, "--count", "-n", help="Number of drills"),
    difficulty: Optional[str] = typer.Option(None, "--difficulty", "-d", help=_DIFFICULTY_HELP),
    style: Optional[str] = typer.Option(None, "--style", help=_STYLE_HELP),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible batch"),
):
    """Export a batch of drills, with answers, to a JSON file."""
    from poker_drill.export.scenario import ScenarioExporter
    from poker_drill.training.session import DrillSession

    selector, level, text_style = _parse_options(topic, difficulty, style)
    session = DrillSession(selector=selector, difficulty=level, text_style=text_style,
                           seed=seed, adaptive=False)
    scenarios = [session.next_scenario() for _ in range(count)]

    ScenarioExporter.export_scenarios(scenarios, str(output))
    console.print(f"[green]Exported {len(scenarios)} drills to {output}[/green]")


if __name__ == "__main__":
    app()
