"""Shared CLI utilities."""

import asyncio
from datetime import date
from functools import wraps

import click

from ..config import get_settings
from ..models.profile import ProfileSnapshot
from ..services.container import DeskFitServices


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def get_services(ctx: click.Context) -> DeskFitServices:
    """Get the services for this invocation, building them on first use."""
    obj = ctx.ensure_object(dict)
    if "services" not in obj:
        obj["services"] = DeskFitServices.from_settings(get_settings())
    return obj["services"]


def ensure_profile(ctx: click.Context, services: DeskFitServices) -> ProfileSnapshot:
    """Load the saved profile or exit if onboarding has not run."""
    profile = services.profiles.get()
    if profile is None:
        echo_error("No profile found. Run 'deskfit onboard' first.")
        ctx.exit(1)
    return profile


def parse_day(ctx: click.Context, value: str) -> date:
    """Parse a YYYY-MM-DD argument or exit with an error."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        echo_error(f"Invalid date '{value}'. Use YYYY-MM-DD.")
        ctx.exit(1)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append("".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)))

    return "\n".join(line.rstrip() for line in lines)
