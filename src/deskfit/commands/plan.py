"""Daily plan command."""

import click

from .base import echo_success, ensure_profile, format_table, get_services


@click.command()
@click.pass_context
def plan(ctx: click.Context):
    """Show today's sessions and which ones are done.

    Each session recorded today ticks off the next session in the plan.
    """
    services = get_services(ctx)
    ensure_profile(ctx, services)
    today = services.todays_plan()

    click.echo()
    click.echo(click.style(f"Plan for {today.day.isoformat()}", bold=True))
    rows = [
        [
            "x" if session.is_completed else " ",
            session.title,
            f"{session.duration_seconds}s",
            ", ".join(session.exercise_ids) or "-",
        ]
        for session in today.sessions
    ]
    click.echo(format_table(["Done", "Session", "Length", "Exercises"], rows))
    click.echo()

    upcoming = today.next_session
    if upcoming is None:
        echo_success("All sessions done for today.")
    else:
        click.echo(f"{today.completed_count} of {today.session_count} done. Next: {upcoming.title}")
