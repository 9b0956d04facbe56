"""Web API for selffit."""

from .app import create_app

__all__ = ["create_app"]
