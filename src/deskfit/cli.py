"""CLI entry point for deskfit."""

import click

from . import __version__
from .commands import (
    exercises,
    insights,
    onboard,
    plan,
    profile,
    progress,
    report,
    serve,
    session,
)


@click.group()
@click.version_option(version=__version__, prog_name="deskfit")
def main():
    """deskfit: daily desk movement scores and insights.

    Answer a short questionnaire once, record your movement breaks, and get
    a daily engagement score, a weekly summary and a few personalized
    insights each day.

    Example usage:

        # Answer the onboarding questionnaire
        deskfit onboard

        # See your posture analysis
        deskfit report

        # See today's sessions
        deskfit plan

        # Record a three minute break
        deskfit session --minutes 3 --focus neck

        # Check your week and today's insights
        deskfit progress status
        deskfit insights
    """
    pass


# Register commands
main.add_command(onboard)
main.add_command(profile)
main.add_command(report)
main.add_command(plan)
main.add_command(session)
main.add_command(progress)
main.add_command(insights)
main.add_command(exercises)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
