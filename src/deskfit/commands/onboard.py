"""Onboarding command."""

import click

from ..clients.manual import ManualInputClient
from .base import async_command, echo_info, echo_success, echo_warning, get_services


@click.command()
@click.option("--force", is_flag=True, help="Replace an existing profile without asking")
@click.pass_context
@async_command
async def onboard(ctx: click.Context, force: bool):
    """Answer the desk habits questionnaire.

    Your answers are saved as your profile and drive the analysis report,
    daily scores and insights.
    """
    services = get_services(ctx)

    if services.profiles.get() is not None and not force:
        echo_warning("A profile already exists.")
        if not click.confirm("Replace it with new answers?"):
            return

    client = ManualInputClient()
    profile = await client.collect_profile()

    services.save_profile(profile)
    echo_success("Profile saved.")

    report = services.reports.get_or_generate(profile, force=True)
    click.echo()
    click.echo(click.style(report.summary_headline, bold=True))
    click.echo(f"Posture load: {report.score.value}/100 ({report.score.category.display_name})")
    click.echo()
    echo_info("Run 'deskfit report' for the full analysis.")
