"""Settings routes."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ...models.settings import Theme
from ...services.app import SelfFitApp
from ..deps import get_selffit

router = APIRouter(prefix="/settings", tags=["settings"])


class SettingsPatch(BaseModel):
    notifications_enabled: bool | None = None
    reminder_lead_minutes: int | None = None
    default_workout_duration: int | None = None
    theme: Theme | None = None
    week_start_day: int | None = None


@router.get("")
async def get_settings(app: SelfFitApp = Depends(get_selffit)):
    return app.settings.settings.to_dict()


@router.patch("")
async def update_settings(body: SettingsPatch, app: SelfFitApp = Depends(get_selffit)):
    """Change settings; reminders are re-scheduled when needed."""
    updated = await app.update_settings(**body.model_dump(exclude_none=True))
    return updated.to_dict()
