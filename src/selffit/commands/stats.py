"""Weekly statistics command."""

from datetime import datetime

import click

from .base import DATE_FORMATS, anchor_or_today, async_command, open_app


@click.command()
@click.option("--week", "-w", type=click.DateTime(DATE_FORMATS), help="Any date in the week")
@click.pass_context
@async_command
async def stats(ctx: click.Context, week: datetime | None):
    """Show completion statistics for a week (the current week by default)."""
    app = await open_app(ctx)

    weekly = app.store.compute_weekly_stats(anchor_or_today(week))

    click.echo()
    click.echo(
        click.style(
            f"Week of {weekly.week_start.strftime('%Y-%m-%d')}"
            f" ({app.settings.settings.week_start_name} start)",
            bold=True,
        )
    )
    click.echo("=" * 50)
    click.echo(f"Workouts:        {weekly.total_count}")
    click.echo(f"  Completed:     {click.style(str(weekly.completed_count), fg='green')}")
    click.echo(f"  Missed:        {click.style(str(weekly.missed_count), fg='red')}")
    click.echo(f"  Pending:       {weekly.pending_count}")
    click.echo(f"Total time:      {weekly.duration_display}")
    click.echo(f"Completion rate: {weekly.completion_rate_display}")
