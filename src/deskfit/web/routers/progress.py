"""Progress tracking routes."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field, model_validator

from ...models.profile import FocusArea
from ...services.container import DeskFitServices, UnknownExerciseError
from ..dependencies import get_services

router = APIRouter(prefix="/progress", tags=["progress"])


class SessionIn(BaseModel):
    """A completed session. Needs a duration, exercise ids, or both."""

    duration_seconds: int | None = Field(None, ge=0)
    focus_areas: list[FocusArea] = Field(default_factory=list)
    exercise_ids: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_duration(self) -> "SessionIn":
        if self.duration_seconds is None and not self.exercise_ids:
            raise ValueError("Give duration_seconds or at least one exercise id")
        return self


@router.get("")
def get_summary(services: DeskFitServices = Depends(get_services)):
    """Weekly progress summary."""
    return services.progress.refresh_summary().to_dict()


@router.get("/entries")
def list_entries(
    days: int = Query(30, ge=1, le=366),
    services: DeskFitServices = Depends(get_services),
):
    """Stored daily entries from the last `days` days, newest first."""
    entries = services.progress.entries_for_last_days(days)
    return {"entries": [entry.to_dict() for entry in entries]}


@router.post("/sessions", status_code=201)
def record_session(body: SessionIn, services: DeskFitServices = Depends(get_services)):
    """Record a completed session against today's entry."""
    try:
        entry = services.record_session(
            duration_seconds=body.duration_seconds,
            focus_areas=body.focus_areas,
            exercise_ids=body.exercise_ids,
        )
    except UnknownExerciseError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return {
        "entry": entry.to_dict(),
        "summary": services.progress.summary.to_dict(),
    }


@router.delete("/entries/{day}")
def delete_entry(day: date, services: DeskFitServices = Depends(get_services)):
    """Delete the entry for one day."""
    if not services.progress.delete(day):
        raise HTTPException(status_code=404, detail=f"No entry for {day.isoformat()}")
    return {"status": "deleted", "date": day.isoformat()}


@router.delete("")
def clear_progress(services: DeskFitServices = Depends(get_services)):
    """Delete every entry."""
    services.progress.clear_all()
    return {"status": "cleared"}
