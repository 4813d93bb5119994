"""
Tracker Image CLI - Build the Torrust tracker container image.
"""

import logging

import typer
from rich.console import Console

from .builder import announce, build_command, build_image, write_line
from .errors import ImageBuildError
from .settings import get_settings, reload_settings

# Setup
app = typer.Typer(
    name="torrust-tracker-build",
    help="Build the Torrust tracker container image",
    add_completion=False,
)
console = Console()


def configure_logging():
    """Configure logging based on settings."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _handle_build_error(e: ImageBuildError) -> None:
    """Report a build error and exit with its shell-compatible code.

    Raises:
        SystemExit: Always exits with e.exit_code
    """
    console.print(f"[bold red]✗ Build failed:[/bold red] {e}", highlight=False)
    raise typer.Exit(code=e.exit_code)


def _run_build() -> None:
    try:
        exit_code = build_image(get_settings(), console)
    except ImageBuildError as e:
        _handle_build_error(e)

    raise typer.Exit(code=exit_code)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Build the image when no command is given."""
    # Environment is read per invocation
    reload_settings()
    configure_logging()

    if ctx.invoked_subcommand is None:
        _run_build()


@app.command()
def build():
    """Run docker build with the UID and RUN_AS_USER build arguments."""
    _run_build()


@app.command()
def show():
    """Print the resolved values and build command without running it."""
    settings = get_settings()
    announce(settings, console)
    write_line(console, " ".join(build_command(settings)))


@app.command()
def version():
    """Show tracker image builder version."""
    from . import __version__

    console.print(f"torrust-tracker-build version: [bold]{__version__}[/bold]")


if __name__ == "__main__":
    app()
