"""Workout type routes."""

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from ...config import FALLBACK_TYPE_COLOR
from ...services.app import SelfFitApp
from ..deps import get_selffit

router = APIRouter(prefix="/types", tags=["types"])


class WorkoutTypeCreate(BaseModel):
    name: str
    color: str = FALLBACK_TYPE_COLOR
    icon: str | None = None


class WorkoutTypePatch(BaseModel):
    name: str | None = None
    color: str | None = None
    icon: str | None = None


@router.get("")
async def list_types(app: SelfFitApp = Depends(get_selffit)):
    return [t.to_dict() for t in app.workout_types.list_all()]


@router.post("", status_code=201)
async def create_type(body: WorkoutTypeCreate, app: SelfFitApp = Depends(get_selffit)):
    workout_type = await app.workout_types.add(body.name, body.color, body.icon)
    return workout_type.to_dict()


@router.patch("/{type_id}")
async def update_type(
    type_id: str, body: WorkoutTypePatch, app: SelfFitApp = Depends(get_selffit)
):
    workout_type = await app.workout_types.update(
        type_id, **body.model_dump(exclude_unset=True)
    )
    return workout_type.to_dict()


@router.delete("/{type_id}", status_code=204)
async def delete_type(type_id: str, app: SelfFitApp = Depends(get_selffit)):
    """Delete a custom type. Default types are refused with 422."""
    await app.workout_types.delete(type_id)
    return Response(status_code=204)
