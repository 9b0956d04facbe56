"""CLI entry point for selffit."""

import logging
from pathlib import Path

import click

from . import __version__
from .commands import init, reminders, serve, settings, stats, types, workouts


@click.group()
@click.version_option(version=__version__, prog_name="selffit")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="SELFFIT_DATA_DIR",
    help="Directory holding the selffit database",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, data_dir: Path | None, verbose: bool):
    """selffit: personal workout scheduling tracker.

    Schedule workouts, get reminded before they start, mark them
    completed or missed, and review your week.

    Example usage:

        # Initialize the project
        selffit init

        # Schedule a workout
        selffit workouts add "Leg day" --type Gym --start "2026-10-19 18:00"

        # Review the week
        selffit workouts list
        selffit stats
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


# Register commands
main.add_command(init)
main.add_command(workouts)
main.add_command(stats)
main.add_command(settings)
main.add_command(types)
main.add_command(reminders)
main.add_command(serve)


def run():
    """Run the CLI (handles async event loop)."""
    main()


if __name__ == "__main__":
    run()
