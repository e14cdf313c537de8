"""Progress tracking commands."""

import click

from .base import (
    echo_info,
    echo_success,
    echo_warning,
    format_table,
    get_services,
    parse_day,
)


@click.group()
def progress():
    """Track daily scores, streaks and weekly progress."""
    pass


@progress.command("status")
@click.pass_context
def status(ctx: click.Context):
    """Show this week's summary.

    Displays the weekly average score, sessions, streak, trend and the
    last seven days.
    """
    services = get_services(ctx)
    summary = services.progress.refresh_summary()

    click.echo()
    click.echo(click.style("Weekly Progress", bold=True))
    click.echo("=" * 50)

    if not summary.has_enough_data:
        echo_info("No sessions in the last 7 days.")
        click.echo("Record one with 'deskfit session --minutes 3'.")
        return

    click.echo(f"Week of: {summary.week_start_date.isoformat()}")
    click.echo(f"Average score: {summary.weekly_average_score}")
    click.echo(
        f"Sessions: {summary.weekly_sessions_completed} "
        f"({summary.weekly_minutes_completed} min)"
    )
    click.echo(f"Streak: {summary.get_streak_display()}")
    click.echo(f"Trend: {summary.trend.get_display()}")
    if summary.focus_areas_covered:
        click.echo(f"Focus areas: {', '.join(summary.focus_areas_covered)}")

    click.echo()
    click.echo(click.style("Last 7 Days:", bold=True))
    rows = []
    for entry in summary.last_7_days:
        rows.append(
            [
                entry.day.strftime("%a %Y-%m-%d"),
                str(entry.score) if entry.has_activity else "-",
                str(entry.sessions_completed),
                str(entry.minutes_completed),
            ]
        )
    click.echo(format_table(["Day", "Score", "Sessions", "Minutes"], rows))

    if summary.wins:
        click.echo()
        click.echo(click.style("Wins:", bold=True))
        for win in summary.wins:
            click.echo(f"  * {win.title}: {win.description}")


@progress.command("history")
@click.option("--days", "-d", default=30, type=click.IntRange(min=1), help="How many days back")
@click.pass_context
def history(ctx: click.Context, days: int):
    """List stored daily entries, newest first."""
    services = get_services(ctx)
    entries = services.progress.entries_for_last_days(days)

    if not entries:
        echo_info(f"No entries in the last {days} days.")
        return

    rows = [
        [
            entry.day.isoformat(),
            str(entry.score),
            entry.score_category.value,
            str(entry.sessions_completed),
            str(entry.minutes_completed),
            ", ".join(entry.focus_areas) or "-",
        ]
        for entry in entries
    ]
    click.echo(
        format_table(["Date", "Score", "Band", "Sessions", "Minutes", "Focus"], rows)
    )


@progress.command("delete")
@click.argument("day")
@click.pass_context
def delete(ctx: click.Context, day: str):
    """Delete the entry for DAY (YYYY-MM-DD)."""
    target = parse_day(ctx, day)
    services = get_services(ctx)

    if services.progress.delete(target):
        echo_success(f"Deleted entry for {target.isoformat()}.")
    else:
        echo_warning(f"No entry for {target.isoformat()}.")


@progress.command("reset")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def reset(ctx: click.Context, yes: bool):
    """Delete every progress entry."""
    if not yes and not click.confirm("Delete all progress entries?"):
        return

    services = get_services(ctx)
    services.progress.clear_all()
    echo_success("All progress entries deleted.")
