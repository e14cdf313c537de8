"""Daily insight routes."""

from fastapi import APIRouter, Depends

from ...services.container import DeskFitServices
from ..dependencies import get_services

router = APIRouter(prefix="/insights", tags=["insights"])


@router.get("/today")
def todays_insights(refresh: bool = False, services: DeskFitServices = Depends(get_services)):
    """Today's insights. Works without a profile, with general content."""
    insights = services.todays_insights(force=refresh)
    return {"insights": [insight.to_dict() for insight in insights]}
