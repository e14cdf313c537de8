"""Request dependencies shared by the routers."""

from fastapi import HTTPException, Request

from ..models.profile import ProfileSnapshot
from ..services.container import DeskFitServices


def get_services(request: Request) -> DeskFitServices:
    """Get the services from app state."""
    return request.app.state.services


def require_profile(services: DeskFitServices) -> ProfileSnapshot:
    """Load the saved profile or answer 404."""
    profile = services.profiles.get()
    if profile is None:
        raise HTTPException(status_code=404, detail="No profile found. Complete onboarding first.")
    return profile
