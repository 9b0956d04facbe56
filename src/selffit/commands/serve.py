"""Web server command."""

import click

from .base import ensure_initialized, get_data_dir


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the JSON API server.

    Examples:

        # Start on default port (8000)
        selffit serve

        # Development mode with auto-reload
        selffit serve --reload
    """
    ensure_initialized(ctx)

    import os

    import uvicorn

    from ..config import DATA_DIR_ENV
    from ..web import create_app

    data_dir = get_data_dir(ctx)
    if data_dir is not None:
        # Picked up by create_app, including in the reloader's subprocess
        os.environ[DATA_DIR_ENV] = str(data_dir)

    click.echo()
    click.echo(click.style("Starting selffit API server...", fg="green"))
    click.echo()
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo(f"  Docs:    http://{host}:{port}/docs")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    uvicorn.run(
        create_app() if not reload else "selffit.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
    )
