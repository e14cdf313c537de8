"""Session completion command."""

import click

from ..models.profile import FocusArea
from ..services import scoring
from ..services.container import UnknownExerciseError
from .base import echo_error, echo_info, echo_success, get_services


@click.command()
@click.option("--minutes", "-m", type=click.IntRange(min=0), help="Session length in minutes")
@click.option("--seconds", "-s", type=click.IntRange(min=0), help="Session length in seconds")
@click.option(
    "--focus",
    "-f",
    multiple=True,
    type=click.Choice([area.value for area in FocusArea]),
    help="Focus area the session covered (repeatable)",
)
@click.option(
    "--exercise",
    "-e",
    "exercise_ids",
    multiple=True,
    help="Exercise id from 'deskfit exercises' (repeatable)",
)
@click.pass_context
def session(
    ctx: click.Context,
    minutes: int | None,
    seconds: int | None,
    focus: tuple[str, ...],
    exercise_ids: tuple[str, ...],
):
    """Record a completed session.

    Give the session length, the exercises you did, or both. Without a
    length, the catalog durations of the exercises are used.

    Examples:

        deskfit session --minutes 5 --focus neck --focus shoulders

        deskfit session -e chin_tucks -e shoulder_rolls
    """
    if minutes is None and seconds is None and not exercise_ids:
        echo_error("Give --minutes, --seconds or at least one --exercise.")
        ctx.exit(1)

    duration = None
    if minutes is not None or seconds is not None:
        duration = (minutes or 0) * 60 + (seconds or 0)

    services = get_services(ctx)
    try:
        entry = services.record_session(
            duration_seconds=duration,
            focus_areas=focus,
            exercise_ids=exercise_ids,
        )
    except UnknownExerciseError as e:
        echo_error(f"{e} Run 'deskfit exercises' to see the catalog.")
        ctx.exit(1)

    echo_success(
        f"Session recorded. Today: {entry.sessions_completed} session(s), "
        f"{entry.minutes_completed} min"
    )
    click.echo(f"Score: {entry.score} - {entry.score_category.encouragement}")
    if entry.focus_areas:
        click.echo(f"Focus areas: {', '.join(entry.focus_areas)}")

    projected = scoring.projected_score_after_session(entry.score, entry.sessions_completed)
    echo_info(scoring.projection_message(projected - entry.score))
