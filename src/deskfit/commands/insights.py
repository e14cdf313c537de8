"""Daily insight command."""

import click

from .base import echo_info, get_services


@click.command()
@click.option("--refresh", is_flag=True, help="Regenerate instead of using today's cache")
@click.pass_context
def insights(ctx: click.Context, refresh: bool):
    """Show today's insights.

    Insights are generated once per day and stay the same until tomorrow.
    """
    services = get_services(ctx)
    if services.profiles.get() is None:
        echo_info("No profile yet, so insights are general. Run 'deskfit onboard'.")

    today = services.todays_insights(force=refresh)

    click.echo()
    for insight in today:
        header = click.style(insight.title, bold=True)
        if insight.badge:
            header += click.style(f"  [{insight.badge}]", fg="cyan")
        click.echo(header)
        click.echo(click.style(insight.category.display_name, dim=True))
        click.echo(insight.body)
        if insight.cta_text:
            click.echo(f"-> {insight.cta_text}")
        click.echo()
