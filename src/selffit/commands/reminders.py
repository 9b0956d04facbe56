"""Reminder commands."""

import click

from .base import async_command, echo_info, format_table, open_app


@click.group()
def reminders():
    """Inspect and deliver scheduled workout reminders."""
    pass


@reminders.command("list")
@click.pass_context
@async_command
async def list_reminders(ctx: click.Context):
    """List scheduled reminders."""
    app = await open_app(ctx)
    pending = await app.notifications.pending()

    if not pending:
        echo_info("No reminders scheduled.")
        return

    rows = [
        [n.fire_at.strftime("%Y-%m-%d %H:%M"), n.body, n.identifier]
        for n in pending
    ]
    click.echo(format_table(["Fires at", "Message", "Identifier"], rows))


@reminders.command("due")
@click.pass_context
@async_command
async def due(ctx: click.Context):
    """Print reminders that are due and mark them delivered.

    Meant to be run periodically, e.g. from cron.
    """
    app = await open_app(ctx)
    notifications = await app.notifications.due()

    for notification in notifications:
        click.echo(click.style(f"{notification.title}: ", bold=True) + notification.body)
        await app.notifications.mark_delivered(notification.identifier)
