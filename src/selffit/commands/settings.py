"""Settings commands."""

import click

from ..models.settings import WEEKDAY_NAMES, Theme
from .base import async_command, echo_error, echo_info, echo_success, open_app


@click.group()
def settings():
    """View and change preferences."""
    pass


@settings.command("show")
@click.pass_context
@async_command
async def show(ctx: click.Context):
    """Show current settings."""
    app = await open_app(ctx)
    current = app.settings.settings

    click.echo()
    click.echo(click.style("Settings", bold=True))
    click.echo("=" * 40)
    click.echo(f"Notifications:    {'on' if current.notifications_enabled else 'off'}")
    click.echo(f"Reminder:         {current.reminder_lead_minutes} min before start")
    click.echo(f"Default duration: {current.default_workout_duration} min")
    click.echo(f"Week starts on:   {current.week_start_name}")
    click.echo(f"Theme:            {current.theme.value}")


@settings.command("set")
@click.option("--notifications/--no-notifications", default=None, help="Enable reminders")
@click.option("--reminder", type=int, help="Minutes before a workout to send the reminder")
@click.option("--default-duration", type=int, help="Default workout length in minutes")
@click.option(
    "--week-start",
    type=click.Choice([name.lower() for name in WEEKDAY_NAMES], case_sensitive=False),
    help="First day of the week",
)
@click.option("--theme", type=click.Choice([t.value for t in Theme]), help="Display theme")
@click.pass_context
@async_command
async def set_settings(
    ctx: click.Context,
    notifications: bool | None,
    reminder: int | None,
    default_duration: int | None,
    week_start: str | None,
    theme: str | None,
):
    """Change one or more settings.

    Changing notification settings re-schedules all reminders.

    Example:

        selffit settings set --reminder 15 --week-start sunday
    """
    app = await open_app(ctx)

    changes = {}
    if notifications is not None:
        changes["notifications_enabled"] = notifications
    if reminder is not None:
        changes["reminder_lead_minutes"] = reminder
    if default_duration is not None:
        changes["default_workout_duration"] = default_duration
    if week_start is not None:
        changes["week_start_day"] = [n.lower() for n in WEEKDAY_NAMES].index(week_start.lower())
    if theme is not None:
        changes["theme"] = theme

    if not changes:
        echo_info("Nothing to change.")
        return

    try:
        await app.update_settings(**changes)
    except ValueError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success("Settings saved")
