"""Request dependencies."""

from fastapi import Request

from ..services.app import SelfFitApp


def get_selffit(request: Request) -> SelfFitApp:
    """Get the opened app from application state."""
    return request.app.state.selffit
