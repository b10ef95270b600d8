"""
Console daily check-in.

Submits today's answers, or shows today's result when the check-in is already
done, then renders the recent progress window.

Run with: uv run python run_checkin.py 6 A B B 5
(slider values as integers, choice questions as option letters)
"""

import logging
import sys

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from adapters.storage import JsonFileHistoryStore
from assessment.config import get_config, validate_config
from assessment.domain.errors import AnswerValidationError, IdempotencyViolation, PersistenceError
from assessment.domain.models import ColorBucket, Submission
from assessment.logging_config import configure_logging
from assessment.services import DailyCheckInService, RecommendationClassifier

console = Console()

BAR_STYLES = {
    ColorBucket.LOW: "red",
    ColorBucket.MID: "yellow",
    ColorBucket.HIGH: "green",
}


def show_questions(service: DailyCheckInService) -> None:
    table = Table(title="Daily Wellness Quiz")
    table.add_column("#", justify="right")
    table.add_column("Question")
    table.add_column("Answer with")

    for question in service.catalog.questions():
        if question.options:
            answers = ", ".join(f"{o.value}: {o.label}" for o in question.options)
        else:
            low, high = question.scale_labels or ("", "")
            answers = f"{question.min_value} ({low}) .. {question.max_value} ({high})"
        table.add_row(str(question.id), question.prompt, answers)

    console.print(table)


def show_result(submission: Submission, heading: str) -> None:
    pathway = RecommendationClassifier.care_pathway(submission.tier)
    console.print(
        Panel(
            f"Normalized score: [bold]{submission.normalized_score}[/bold] / 10\n"
            f"Recommendation: [bold]{submission.tier.value}[/bold]\n"
            f"Next step: {pathway.value.replace('_', ' ')}",
            title=heading,
        )
    )


def show_progress(service: DailyCheckInService) -> None:
    points = service.progress()
    if not points:
        console.print("[dim]Take a quiz to start tracking your progress![/dim]")
        return

    table = Table(title="Tracking (Score 0-10)")
    table.add_column("Day")
    table.add_column("Score", justify="right")
    table.add_column("")
    table.add_column("Recommendation")

    for point in points:
        score = point.submission.normalized_score
        bar = "█" * round(score * 2)
        table.add_row(
            point.day_label,
            f"{score}",
            f"[{BAR_STYLES[point.color]}]{bar}[/]",
            point.submission.tier.value,
        )

    console.print(table)


def main(argv: list[str]) -> int:
    validate_config()
    config = get_config()
    logging.basicConfig(level=config.logging.level, format="%(message)s")
    configure_logging(config.logging)

    store = JsonFileHistoryStore(config.storage.history_path, config.storage.storage_key)
    service = DailyCheckInService.from_config(store, config)

    if not argv:
        today = service.today_result()
        if today is not None:
            show_result(today, "Daily Quiz Complete!")
        else:
            show_questions(service)
        show_progress(service)
        return 0

    if service.has_completed_today():
        show_result(service.today_result(), "Daily Quiz Complete!")  # type: ignore[arg-type]
        show_progress(service)
        return 0

    questions = service.catalog.questions()
    if len(argv) != len(questions):
        console.print(f"[red]Expected {len(questions)} answers, got {len(argv)}[/red]")
        show_questions(service)
        return 2

    try:
        answers = [
            service.catalog.score_for(question.id, choice)
            for question, choice in zip(questions, argv, strict=True)
        ]
    except AnswerValidationError as e:
        console.print(f"[red]{e}[/red]")
        return 2

    try:
        result = service.submit(answers)
    except PersistenceError as e:
        console.print(f"[red]Could not save today's check-in: {e}[/red]")
        return 1

    if result.is_err():
        error = result.unwrap_err()
        if isinstance(error, IdempotencyViolation) and error.existing is not None:
            show_result(error.existing, "Daily Quiz Complete!")
        else:
            console.print(f"[red]{error}[/red]")
            return 2
    else:
        show_result(result.unwrap(), "Quiz Complete!")

    show_progress(service)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
