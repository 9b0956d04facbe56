"""Initialize project command."""

import click

from ..config import get_data_dir as resolve_data_dir
from ..config import get_db_path
from ..db import init_db
from ..services.app import SelfFitApp
from .base import async_command, echo_info, echo_success, get_data_dir


@click.command()
@click.pass_context
@async_command
async def init(ctx: click.Context):
    """Initialize the selffit data directory and database.

    Creates the SQLite database and stores the default settings and
    workout types.
    """
    data_dir = resolve_data_dir(get_data_dir(ctx))
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing selffit in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    app = await SelfFitApp.open(data_dir)
    await app.settings.update()
    await app.workout_types.save()
    echo_success(f"{len(app.workout_types.list_all())} workout types available")

    click.echo()
    click.echo("selffit is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo('  selffit workouts add "Morning run" --type Running --start "2026-10-19 07:00"')
    click.echo("  selffit workouts list")
    click.echo("  selffit stats")
