"""Exercise catalog routes."""

from fastapi import APIRouter, Depends, HTTPException, Query

from ...models.profile import FocusArea
from ...services.container import DeskFitServices
from ..dependencies import get_services

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("")
def list_exercises(
    focus: list[FocusArea] = Query(default=[]),
    services: DeskFitServices = Depends(get_services),
):
    """Catalog exercises, optionally limited to some focus areas."""
    catalog = services.catalog
    selected = catalog.for_focus_areas(focus) if focus else catalog.all()
    return {"exercises": [exercise.to_dict() for exercise in selected]}


@router.get("/{exercise_id}")
def get_exercise(exercise_id: str, services: DeskFitServices = Depends(get_services)):
    """One exercise by id."""
    exercise = services.catalog.get(exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail=f"Unknown exercise '{exercise_id}'")
    return exercise.to_dict()
