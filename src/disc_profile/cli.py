"""Command-line interface for DISC Profile."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from disc_profile.config import get_settings
from disc_profile.db import Answer, NarrativeBundle, Repository, get_session, init_db
from disc_profile.db.models import TRAIT_ORDER
from disc_profile.quiz import QuestionBank, QuizSession, get_question_bank
from disc_profile.storage import ResultRecorder
from disc_profile.traits import get_trait_catalog, score_answers
from disc_profile.utils.logging import get_logger, setup_logging

app = typer.Typer(
    name="disc-profile",
    help="DISC behavioral profile questionnaire",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


def init_app():
    """Initialize the application."""
    setup_logging()
    init_db()


def _print_report(bundle: NarrativeBundle, title: str = "DISC Profile") -> None:
    """Render a scored profile to the console."""
    catalog = get_trait_catalog()

    console.print(Panel(
        f"[bold]{bundle.primary_profile}[/bold] / {bundle.secondary_profile}\n"
        f"{bundle.combination_label}",
        title=title,
    ))

    console.print("\n[bold]Distribution:[/bold]")
    for trait in TRAIT_ORDER:
        percentage = bundle.distribution.get(trait)
        bar = "█" * (percentage // 5)
        console.print(f"  {trait.value} {catalog.get_name(trait):13} {bar} {percentage}%")

    console.print(f"\n{bundle.behavioral_feedback}")

    console.print("\n[bold]Strengths:[/bold]")
    for item in bundle.strengths:
        console.print(f"  • {item}")

    console.print("\n[bold]Development areas:[/bold]")
    for item in bundle.development_areas:
        console.print(f"  • {item}")

    console.print(f"\n[bold]{bundle.combination_label}[/bold]")
    console.print(bundle.secondary_analysis_text)
    for item in bundle.combination_influence_points:
        console.print(f"  • {item}")


def _write_bundle(bundle: NarrativeBundle, out: Path) -> None:
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(bundle.model_dump_json(indent=2), encoding="utf-8")
    console.print(f"[green]Report saved to: {out}[/green]")


def _parse_answer(bank: QuestionBank, item: Dict[str, Any]) -> Answer:
    """
    Build an Answer from a JSON record.

    The trait comes from the bank. A record that names its own trait must
    agree with the bank's mapping for that question and letter.
    """
    if not isinstance(item, dict) or "question_id" not in item or "choice" not in item:
        raise ValueError(f"Answer record needs 'question_id' and 'choice': {item!r}")

    answer = bank.build_answer(
        int(item["question_id"]),
        str(item["choice"]),
        elapsed_seconds=float(item.get("elapsed_seconds", 0.0)),
    )
    claimed = item.get("trait")
    if claimed and str(claimed).upper() != answer.trait.value:
        raise ValueError(
            f"Question {answer.question_id} maps choice {answer.choice} to "
            f"{answer.trait.value}, not {claimed}"
        )
    return answer


# ============================================================================
# Questionnaire Commands
# ============================================================================


@app.command("questions")
def questions(
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Number of questions to show"),
):
    """List the questions of the bank."""
    setup_logging()

    bank = get_question_bank()
    table = Table(title="DISC Questions")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Question", style="cyan")
    table.add_column("Options")

    for question in bank.get_questions(limit):
        options = "\n".join(
            f"{option.letter} ({option.trait.value}) {option.text}" for option in question.options
        )
        table.add_row(str(question.id), question.text, options)

    console.print(table)


@app.command("take")
def take(
    email: str = typer.Option(..., "--email", "-e", help="Respondent email"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Respondent name"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Output JSON path"),
):
    """Answer the questionnaire interactively and show the report."""
    init_app()
    settings = get_settings()

    with get_session() as session:
        respondent = Repository(session).get_or_create_respondent(email, name)
        user_id = respondent.id
        user_name = respondent.name

    recorder = ResultRecorder()
    recorder.log_activity(user_id, "test_started")

    quiz = QuizSession(limit=settings.question_limit)
    console.print(Panel(
        f"Hello [bold]{user_name}[/bold]! Answer {quiz.total_questions} questions "
        f"by typing the letter of the option that describes you best.",
        title="DISC Questionnaire",
    ))

    while not quiz.is_complete:
        question = quiz.current_question
        console.print(
            f"\n[bold]{quiz.current_index + 1}/{quiz.total_questions}[/bold] "
            f"[dim]({quiz.progress:.0f}%)[/dim] {question.text}"
        )
        for option in question.options:
            console.print(f"  {option.letter}) {option.text}")

        try:
            choice = console.input("[bold cyan]Your choice:[/bold cyan] ")
        except (KeyboardInterrupt, EOFError):
            console.print("\n[yellow]Questionnaire cancelled.[/yellow]")
            raise typer.Exit(1)

        try:
            quiz.answer(choice)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")

    bundle = recorder.save_test_responses(user_id, quiz.answers)
    recorder.log_activity(user_id, "report_viewed", {"profile": bundle.primary_profile})

    _print_report(bundle, title=f"{user_name}'s DISC Profile")
    if out:
        _write_bundle(bundle, out)


@app.command("score")
def score(
    answers_file: Path = typer.Option(..., "--answers", "-a", help="Path to answers JSON file"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Output JSON path"),
):
    """Score a JSON list of answers without storing it."""
    setup_logging()

    try:
        with open(answers_file, "r", encoding="utf-8") as f:
            records: List[Dict[str, Any]] = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[red]Error reading {answers_file}: {e}[/red]")
        raise typer.Exit(1)

    if not isinstance(records, list):
        console.print(f"[red]Error: {answers_file} must contain a list of answer objects[/red]")
        raise typer.Exit(1)

    bank = get_question_bank()
    try:
        answers = [_parse_answer(bank, item) for item in records]
        bundle = score_answers(answers)
    except (TypeError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    _print_report(bundle)
    if out:
        _write_bundle(bundle, out)


# ============================================================================
# Report Commands
# ============================================================================


@app.command("reports")
def reports(
    email: str = typer.Option(..., "--email", "-e", help="Respondent email"),
):
    """List stored reports for a respondent."""
    init_app()

    with get_session() as session:
        respondent = Repository(session).get_respondent_by_email(email)
        if not respondent:
            console.print(f"[red]Respondent not found: {email}[/red]")
            raise typer.Exit(1)
        user_id = respondent.id
        user_name = respondent.name

    stored = ResultRecorder().get_reports(user_id)
    if not stored:
        console.print("[yellow]No reports found.[/yellow]")
        return

    table = Table(title=f"Reports for {user_name}")
    table.add_column("Date", style="dim")
    table.add_column("D", justify="right")
    table.add_column("I", justify="right")
    table.add_column("S", justify="right")
    table.add_column("C", justify="right")
    table.add_column("Primary", style="cyan")
    table.add_column("Secondary")

    for report in stored:
        table.add_row(
            report.created_at.strftime("%Y-%m-%d %H:%M") if report.created_at else "-",
            f"{report.d_natural}%",
            f"{report.i_natural}%",
            f"{report.s_natural}%",
            f"{report.c_natural}%",
            report.primary_profile,
            report.secondary_profile,
        )

    console.print(table)


# ============================================================================
# Utility Commands
# ============================================================================


@app.command("init-db")
def init_database():
    """Initialize the database."""
    setup_logging()
    init_db()
    console.print("[green]Database initialized successfully![/green]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
