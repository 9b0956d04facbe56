"""Statistics routes."""

from datetime import date

from fastapi import APIRouter, Depends, Query

from ...services.app import SelfFitApp
from ..deps import get_selffit

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/week")
async def weekly_stats(
    anchor: date | None = Query(None, description="Any date within the week"),
    app: SelfFitApp = Depends(get_selffit),
):
    """Completion statistics for the anchor date's week."""
    return app.store.compute_weekly_stats(anchor or date.today()).to_dict()
