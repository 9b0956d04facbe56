"""Shared CLI utilities."""

import asyncio
from datetime import datetime
from functools import wraps
from pathlib import Path

import click

from ..config import get_db_path
from ..models.workout import WorkoutRecord
from ..services.app import SelfFitApp

DATETIME_FORMATS = ["%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S"]
DATE_FORMATS = ["%Y-%m-%d"]


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def get_data_dir(ctx: click.Context) -> Path | None:
    """Data directory chosen with --data-dir, if any."""
    obj = ctx.find_root().obj or {}
    return obj.get("data_dir")


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path(get_data_dir(ctx))
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'selffit init' first."
        )
        ctx.exit(1)


async def open_app(ctx: click.Context) -> SelfFitApp:
    """Open the app for the selected data directory."""
    ensure_initialized(ctx)
    return await SelfFitApp.open(get_data_dir(ctx))


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = [
        "".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)),
        "".join("-" * w + " " * padding for w in widths),
    ]
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row))
        )

    return "\n".join(lines)


def workout_rows(app: SelfFitApp, workouts: list[WorkoutRecord]) -> list[list[str]]:
    """Table rows for a list of workouts."""
    rows = []
    for workout in sorted(workouts, key=lambda w: w.start):
        known = app.workout_types.get_by_name(workout.workout_type) is not None
        type_label = workout.workout_type if known else f"{workout.workout_type} (?)"
        rows.append(
            [
                workout.id[:8],
                workout.get_time_display(),
                workout.title,
                type_label,
                f"{workout.duration_minutes}m",
                workout.get_status_display(),
            ]
        )
    return rows


WORKOUT_HEADERS = ["ID", "When", "Title", "Type", "Duration", "Status"]


def resolve_workout_id(app: SelfFitApp, prefix: str) -> str | None:
    """Expand an id prefix (as shown in tables) to a full workout id."""
    if app.store.get_by_id(prefix):
        return prefix
    matches = [r.id for r in app.store.records if r.id.startswith(prefix)]
    if len(matches) == 1:
        return matches[0]
    return None


def anchor_or_today(week: datetime | None) -> datetime:
    return week or datetime.now()
