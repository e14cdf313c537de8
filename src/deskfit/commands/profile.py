"""Profile and analysis report commands."""

import json

import click

from .base import ensure_profile, get_services


@click.group()
def profile():
    """View your onboarding profile."""
    pass


@profile.command("show")
@click.option("--json", "as_json", is_flag=True, help="Print the stored profile as JSON")
@click.pass_context
def show(ctx: click.Context, as_json: bool):
    """Show the saved profile."""
    services = get_services(ctx)
    snapshot = ensure_profile(ctx, services)

    if as_json:
        click.echo(json.dumps(snapshot.to_dict(), indent=2))
        return

    click.echo()
    click.echo(click.style("Your Profile", bold=True))
    click.echo("=" * 40)
    click.echo(snapshot.get_summary().rstrip())


@click.command()
@click.option("--refresh", is_flag=True, help="Regenerate even if the profile is unchanged")
@click.pass_context
def report(ctx: click.Context, refresh: bool):
    """Show the posture analysis report for your profile.

    The report is cached and only regenerated when your profile changes.
    """
    services = get_services(ctx)
    snapshot = ensure_profile(ctx, services)

    analysis = services.reports.get_or_generate(snapshot, force=refresh)

    click.echo()
    click.echo(click.style(analysis.summary_headline, bold=True))
    click.echo("=" * 50)
    click.echo(analysis.summary_body)
    click.echo()
    click.echo(
        f"Posture load: {analysis.score.value}/100 "
        f"({analysis.score.category.display_name})"
    )

    severity_colors = {"high": "red", "medium": "yellow", "low": "green"}
    if analysis.insights:
        click.echo()
        click.echo(click.style("Insights:", bold=True))
        for card in analysis.insights:
            tag = click.style(
                f"[{card.severity.value}]", fg=severity_colors[card.severity.value]
            )
            click.echo(f"  {tag} {card.title}")
            click.echo(f"      {card.body}")
            if card.action_label:
                click.echo(f"      -> {card.action_label}")

    _echo_list("Risk factors", analysis.risk_factors)
    _echo_list("Recommended priorities", analysis.recommended_priorities)
    _echo_list("This week", analysis.weekly_actions)

    click.echo()
    for disclaimer in analysis.disclaimers:
        click.echo(click.style(disclaimer, dim=True))


def _echo_list(title: str, items: list[str]) -> None:
    if not items:
        return
    click.echo()
    click.echo(click.style(f"{title}:", bold=True))
    for item in items:
        click.echo(f"  - {item}")
