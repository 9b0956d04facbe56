"""Workout management commands."""

from datetime import datetime, timedelta

import click

from ..errors import NotFoundError
from ..models.workout import CompletionStatus, WorkoutDraft, validate_changes
from ..notifications import identifier_for
from .base import (
    DATE_FORMATS,
    DATETIME_FORMATS,
    WORKOUT_HEADERS,
    anchor_or_today,
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    format_table,
    open_app,
    resolve_workout_id,
    workout_rows,
)


@click.group()
def workouts():
    """Schedule, edit and complete workouts."""
    pass


@workouts.command("add")
@click.argument("title", required=False)
@click.option("--type", "-t", "workout_type", help="Workout type name")
@click.option("--start", "-s", type=click.DateTime(DATETIME_FORMATS), help="Start time")
@click.option("--end", "-e", type=click.DateTime(DATETIME_FORMATS), help="End time")
@click.option("--duration", "-d", type=int, help="Duration in minutes (instead of --end)")
@click.option("--location", "-l", help="Where the workout takes place")
@click.option("--notes", "-n", help="Free-form notes")
@click.option("--interactive", "-i", is_flag=True, help="Ask for the details interactively")
@click.pass_context
@async_command
async def add(
    ctx: click.Context,
    title: str | None,
    workout_type: str | None,
    start: datetime | None,
    end: datetime | None,
    duration: int | None,
    location: str | None,
    notes: str | None,
    interactive: bool,
):
    """Schedule a new workout.

    Examples:

        selffit workouts add "Morning run" --type Running --start "2026-10-19 07:00" -d 45

        selffit workouts add --interactive
    """
    app = await open_app(ctx)

    if interactive:
        from .prompts import WorkoutQuestionnaire

        draft = await WorkoutQuestionnaire(app).collect_draft()
        if draft is None:
            echo_warning("Cancelled.")
            return
    else:
        if not title or not start:
            echo_error("TITLE and --start are required (or use --interactive).")
            ctx.exit(1)
        if end is None:
            minutes = duration or app.settings.settings.default_workout_duration
            end = start + timedelta(minutes=minutes)
        draft = WorkoutDraft(
            title=title,
            workout_type=workout_type or app.workout_types.list_all()[0].name,
            start=start,
            end=end,
            location=location,
            notes=notes,
        )

    try:
        draft.validate()
    except ValueError as e:
        echo_error(str(e))
        ctx.exit(1)

    if app.workout_types.get_by_name(draft.workout_type) is None:
        echo_warning(f"Unknown workout type '{draft.workout_type}', it will show as uncategorised.")

    record = await app.store.add(draft)
    echo_success(f"Scheduled '{record.title}' ({record.id[:8]})")
    click.echo(f"When: {record.get_time_display()}")

    reminder = await app.notifications.get(identifier_for(record.id))
    if reminder:
        click.echo(f"Reminder: {reminder.fire_at.strftime('%Y-%m-%d %H:%M')}")


@workouts.command("list")
@click.option("--week", "-w", type=click.DateTime(DATE_FORMATS), help="Any date in the week to show")
@click.option("--all", "show_all", is_flag=True, help="Show every workout")
@click.pass_context
@async_command
async def list_workouts(ctx: click.Context, week: datetime | None, show_all: bool):
    """List workouts for a week (the current week by default)."""
    app = await open_app(ctx)

    if show_all:
        items = list(app.store.records)
        heading = "All workouts"
    else:
        anchor = anchor_or_today(week)
        start, end = app.store.week_bounds(anchor)
        items = app.store.get_for_week(anchor)
        heading = f"Week {start.strftime('%Y-%m-%d')} to {end.strftime('%Y-%m-%d')}"

    click.echo()
    click.echo(click.style(heading, bold=True))
    click.echo("=" * 60)

    if not items:
        echo_info("No workouts scheduled.")
        return

    click.echo(format_table(WORKOUT_HEADERS, workout_rows(app, items)))


@workouts.command("show")
@click.argument("workout_id")
@click.pass_context
@async_command
async def show(ctx: click.Context, workout_id: str):
    """Show the details of one workout."""
    app = await open_app(ctx)

    full_id = resolve_workout_id(app, workout_id)
    record = app.store.get_by_id(full_id) if full_id else None
    if record is None:
        echo_error(f"Workout {workout_id} not found.")
        ctx.exit(1)

    workout_type = app.workout_types.get_by_name(record.workout_type)

    click.echo()
    click.echo(click.style(record.title, bold=True))
    click.echo("=" * 50)
    click.echo(f"ID:       {record.id}")
    click.echo(f"When:     {record.get_time_display()} ({record.duration_minutes} min)")
    click.echo(f"Type:     {record.workout_type} [{app.workout_types.resolve_color(record.workout_type)}]")
    if workout_type is None:
        echo_warning("This workout type no longer exists.")
    if record.location:
        click.echo(f"Location: {record.location}")
    if record.notes:
        click.echo(f"Notes:    {record.notes}")
    click.echo(f"Status:   {record.get_status_display()}")
    click.echo(f"Created:  {record.created_at.strftime('%Y-%m-%d %H:%M')}")
    click.echo(f"Updated:  {record.updated_at.strftime('%Y-%m-%d %H:%M')}")


@workouts.command("update")
@click.argument("workout_id")
@click.option("--title", help="New title")
@click.option("--type", "-t", "workout_type", help="New workout type name")
@click.option("--start", "-s", type=click.DateTime(DATETIME_FORMATS), help="New start time")
@click.option("--end", "-e", type=click.DateTime(DATETIME_FORMATS), help="New end time")
@click.option("--location", "-l", help="New location")
@click.option("--notes", "-n", help="New notes")
@click.pass_context
@async_command
async def update(
    ctx: click.Context,
    workout_id: str,
    title: str | None,
    workout_type: str | None,
    start: datetime | None,
    end: datetime | None,
    location: str | None,
    notes: str | None,
):
    """Change a workout. Only the given options are updated.

    Moving the start keeps the duration unless --end is given too.
    """
    app = await open_app(ctx)

    full_id = resolve_workout_id(app, workout_id)
    current = app.store.get_by_id(full_id) if full_id else None
    if current is None:
        echo_error(f"Workout {workout_id} not found.")
        ctx.exit(1)

    changes = {
        key: value
        for key, value in {
            "title": title,
            "workout_type": workout_type,
            "start": start,
            "end": end,
            "location": location,
            "notes": notes,
        }.items()
        if value is not None
    }
    if start is not None and end is None:
        changes["end"] = start + (current.end - current.start)

    if not changes:
        echo_info("Nothing to update.")
        return

    try:
        validate_changes(current, changes)
    except ValueError as e:
        echo_error(str(e))
        ctx.exit(1)

    record = await app.store.update(current.id, **changes)
    echo_success(f"Updated '{record.title}'")
    click.echo(f"When: {record.get_time_display()}")


@workouts.command("delete")
@click.argument("workout_id")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx: click.Context, workout_id: str, yes: bool):
    """Delete a workout and its reminder."""
    app = await open_app(ctx)

    full_id = resolve_workout_id(app, workout_id) or workout_id
    record = app.store.get_by_id(full_id)
    if record and not yes and not click.confirm(f"Delete '{record.title}'?"):
        return

    try:
        await app.store.delete(full_id)
    except NotFoundError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Deleted workout {full_id[:8]}")


async def _set_status(ctx: click.Context, workout_id: str, status: CompletionStatus):
    app = await open_app(ctx)

    full_id = resolve_workout_id(app, workout_id) or workout_id
    try:
        record = await app.store.set_completion_status(full_id, status)
    except NotFoundError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"'{record.title}' is now {record.get_status_display().lower()}")


@workouts.command("complete")
@click.argument("workout_id")
@click.pass_context
@async_command
async def complete(ctx: click.Context, workout_id: str):
    """Mark a workout as completed."""
    await _set_status(ctx, workout_id, CompletionStatus.COMPLETED)


@workouts.command("miss")
@click.argument("workout_id")
@click.pass_context
@async_command
async def miss(ctx: click.Context, workout_id: str):
    """Mark a workout as missed."""
    await _set_status(ctx, workout_id, CompletionStatus.MISSED)


@workouts.command("reset")
@click.argument("workout_id")
@click.pass_context
@async_command
async def reset(ctx: click.Context, workout_id: str):
    """Mark a workout as pending again."""
    await _set_status(ctx, workout_id, CompletionStatus.PENDING)
