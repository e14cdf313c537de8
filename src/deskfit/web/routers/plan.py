"""Daily plan routes."""

from fastapi import APIRouter, Depends

from ...services.container import DeskFitServices
from ..dependencies import get_services, require_profile

router = APIRouter(prefix="/plan", tags=["plan"])


@router.get("/today")
def todays_plan(services: DeskFitServices = Depends(get_services)):
    """Today's sessions with completion status. 404 before onboarding."""
    require_profile(services)
    return services.todays_plan().to_dict()
