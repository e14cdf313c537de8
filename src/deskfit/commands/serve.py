"""Web server command."""

import click

from .base import get_services


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the JSON API server.

    Examples:

        # Start on default port (8000)
        deskfit serve

        # Development mode with auto-reload
        deskfit serve --reload
    """
    import uvicorn

    from ..web import create_app

    services = get_services(ctx)

    click.echo(click.style(f"deskfit API on http://{host}:{port}", fg="green"))
    click.echo(f"  OpenAPI docs: http://{host}:{port}/docs")
    click.echo(f"  Data:         {services.settings.data_dir}")
    click.echo("Press Ctrl+C to stop.")

    if reload:
        # The reloader re-imports the app, so it builds its own services
        uvicorn.run("deskfit.web:create_app", host=host, port=port, reload=True, factory=True)
        return

    app = create_app(services)
    uvicorn.run(app, host=host, port=port)
