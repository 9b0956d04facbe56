"""Workout type commands."""

from collections import Counter

import click

from ..errors import NotFoundError
from .base import async_command, echo_error, echo_success, format_table, open_app


@click.group()
def types():
    """Manage workout types."""
    pass


@types.command("list")
@click.pass_context
@async_command
async def list_types(ctx: click.Context):
    """List workout types and how many workouts use each."""
    app = await open_app(ctx)
    usage = Counter(record.workout_type for record in app.store.records)

    rows = [
        [
            t.id[:8],
            t.name,
            t.color,
            "yes" if t.is_default else "",
            str(usage.get(t.name, 0)),
        ]
        for t in app.workout_types.list_all()
    ]
    click.echo(format_table(["ID", "Name", "Color", "Default", "Workouts"], rows))

    known = {t.name for t in app.workout_types.list_all()}
    dangling = sorted(name for name in usage if name not in known)
    if dangling:
        click.echo()
        click.echo(f"Workouts with removed types: {', '.join(dangling)}")


@types.command("add")
@click.argument("name")
@click.option("--color", "-c", default="#1890FF", show_default=True, help="Hex colour")
@click.option("--icon", help="Icon name")
@click.pass_context
@async_command
async def add(ctx: click.Context, name: str, color: str, icon: str | None):
    """Add a workout type."""
    app = await open_app(ctx)
    try:
        workout_type = await app.workout_types.add(name, color, icon)
    except ValueError as e:
        echo_error(str(e))
        ctx.exit(1)
    echo_success(f"Added workout type '{workout_type.name}'")


@types.command("update")
@click.argument("type_id")
@click.option("--name", help="New name")
@click.option("--color", "-c", help="New hex colour")
@click.option("--icon", help="New icon name")
@click.pass_context
@async_command
async def update(
    ctx: click.Context, type_id: str, name: str | None, color: str | None, icon: str | None
):
    """Rename or recolour a workout type."""
    app = await open_app(ctx)
    changes = {
        k: v for k, v in {"name": name, "color": color, "icon": icon}.items() if v is not None
    }
    try:
        workout_type = await app.workout_types.update(type_id, **changes)
    except (NotFoundError, ValueError) as e:
        echo_error(str(e))
        ctx.exit(1)
    echo_success(f"Updated workout type '{workout_type.name}'")


@types.command("delete")
@click.argument("type_id")
@click.pass_context
@async_command
async def delete(ctx: click.Context, type_id: str):
    """Delete a custom workout type.

    Workouts using it keep the name and are shown with the fallback colour.
    """
    app = await open_app(ctx)
    try:
        await app.workout_types.delete(type_id)
    except (NotFoundError, ValueError) as e:
        echo_error(str(e))
        ctx.exit(1)
    echo_success(f"Deleted workout type {type_id}")
