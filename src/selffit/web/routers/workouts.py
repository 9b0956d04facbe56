"""Workout routes."""

from datetime import date, datetime

from fastapi import APIRouter, Depends, Query, Response
from pydantic import BaseModel, field_validator

from ...errors import NotFoundError
from ...models.workout import (
    CompletionStatus,
    WorkoutDraft,
    to_local_naive,
    validate_changes,
)
from ...services.app import SelfFitApp
from ..deps import get_selffit

router = APIRouter(prefix="/workouts", tags=["workouts"])


class WorkoutCreate(BaseModel):
    title: str
    workout_type: str
    start: datetime
    end: datetime
    location: str | None = None
    notes: str | None = None

    @field_validator("start", "end")
    @classmethod
    def local_time(cls, value: datetime) -> datetime:
        return to_local_naive(value)


class WorkoutPatch(BaseModel):
    title: str | None = None
    workout_type: str | None = None
    start: datetime | None = None
    end: datetime | None = None
    location: str | None = None
    notes: str | None = None

    @field_validator("title", "workout_type", "start", "end")
    @classmethod
    def not_null(cls, value):
        # only location and notes may be cleared
        if value is None:
            raise ValueError("field cannot be null")
        return value

    @field_validator("start", "end")
    @classmethod
    def local_time(cls, value: datetime) -> datetime:
        return to_local_naive(value)


class StatusChange(BaseModel):
    status: CompletionStatus


def _serialize(app: SelfFitApp, record) -> dict:
    data = record.to_dict()
    data["duration_minutes"] = record.duration_minutes
    data["color"] = app.workout_types.resolve_color(record.workout_type)
    return data


@router.get("")
async def list_workouts(app: SelfFitApp = Depends(get_selffit)):
    """All workouts in collection order."""
    return [_serialize(app, r) for r in app.store.records]


@router.post("", status_code=201)
async def create_workout(body: WorkoutCreate, app: SelfFitApp = Depends(get_selffit)):
    """Schedule a workout."""
    draft = WorkoutDraft(**body.model_dump())
    draft.validate()
    record = await app.store.add(draft)
    return _serialize(app, record)


@router.get("/week")
async def workouts_for_week(
    anchor: date | None = Query(None, description="Any date within the week"),
    app: SelfFitApp = Depends(get_selffit),
):
    """Workouts starting in the anchor date's week."""
    anchor = anchor or date.today()
    start, end = app.store.week_bounds(anchor)
    return {
        "week_start": start.isoformat(),
        "week_end": end.isoformat(),
        "workouts": [_serialize(app, r) for r in app.store.get_for_week(anchor)],
    }


@router.get("/{workout_id}")
async def get_workout(workout_id: str, app: SelfFitApp = Depends(get_selffit)):
    record = app.store.get_by_id(workout_id)
    if record is None:
        raise NotFoundError("Workout", workout_id)
    return _serialize(app, record)


@router.patch("/{workout_id}")
async def update_workout(
    workout_id: str, body: WorkoutPatch, app: SelfFitApp = Depends(get_selffit)
):
    """Change some fields of a workout; its reminder is rescheduled."""
    current = app.store.get_by_id(workout_id)
    if current is None:
        raise NotFoundError("Workout", workout_id)

    changes = body.model_dump(exclude_unset=True)
    validate_changes(current, changes)
    record = await app.store.update(workout_id, **changes)
    return _serialize(app, record)


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(workout_id: str, app: SelfFitApp = Depends(get_selffit)):
    await app.store.delete(workout_id)
    return Response(status_code=204)


@router.post("/{workout_id}/status")
async def set_status(
    workout_id: str, body: StatusChange, app: SelfFitApp = Depends(get_selffit)
):
    """Mark a workout completed, missed or pending."""
    record = await app.store.set_completion_status(workout_id, body.status)
    return _serialize(app, record)
