"""Exercise catalog command."""

import click

from ..models.profile import FocusArea
from .base import echo_info, format_table, get_services


@click.command()
@click.option(
    "--focus",
    "-f",
    multiple=True,
    type=click.Choice([area.value for area in FocusArea]),
    help="Only show exercises for this focus area (repeatable)",
)
@click.option(
    "--seconds",
    "-s",
    type=click.IntRange(min=1),
    help="Build a routine that fits in this many seconds",
)
@click.pass_context
def exercises(ctx: click.Context, focus: tuple[str, ...], seconds: int | None):
    """List desk exercises from the catalog."""
    catalog = get_services(ctx).catalog

    if seconds is not None:
        areas = focus or [area.value for area in FocusArea]
        selected = catalog.for_duration(seconds, areas)
    elif focus:
        selected = catalog.for_focus_areas(focus)
    else:
        selected = catalog.all()

    if not selected:
        echo_info("No exercises match.")
        return

    rows = [
        [
            exercise.id,
            exercise.name,
            f"{exercise.duration_seconds}s",
            ", ".join(exercise.focus_areas),
        ]
        for exercise in selected
    ]
    click.echo(format_table(["ID", "Name", "Duration", "Focus"], rows))

    if seconds is not None:
        total = sum(exercise.duration_seconds for exercise in selected)
        click.echo()
        click.echo(f"Total: {total}s of {seconds}s")
