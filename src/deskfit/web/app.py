"""FastAPI application for the deskfit JSON API."""

from fastapi import FastAPI

from .. import __version__
from ..config import get_settings
from ..services.container import DeskFitServices
from .routers import exercises, insights, plan, profile, progress


def create_app(services: DeskFitServices | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        services: Services to serve from; built from the environment
            settings when omitted
    """
    app = FastAPI(
        title="deskfit",
        description="Engagement scores, progress and daily insights for desk workers",
        version=__version__,
    )

    # Store services in app state for use in routers
    app.state.services = services or DeskFitServices.from_settings(get_settings())

    # Include routers
    app.include_router(profile.router)
    app.include_router(progress.router)
    app.include_router(insights.router)
    app.include_router(plan.router)
    app.include_router(exercises.router)

    @app.get("/health")
    def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
