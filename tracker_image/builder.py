"""Image builder - runs ``docker build`` for the tracker image.

Resolve settings -> print status lines -> build the argument list -> run the
build tool once and hand back its exit status untouched.
"""

import logging
import subprocess

from rich.console import Console

from .errors import BuildToolNotExecutableError, BuildToolNotFoundError
from .settings import BuildSettings

logger = logging.getLogger(__name__)

BUILD_TOOL = "docker"
UID_BUILD_ARG = "UID"
RUN_AS_USER_BUILD_ARG = "RUN_AS_USER"
IMAGE_TAG = "torrust-tracker"
BUILD_CONTEXT = "."


def build_command(settings: BuildSettings) -> list[str]:
    """Build the ``docker build`` argument list for the given settings.

    Only the two build argument values depend on the settings, the tag and
    the build context are fixed.

    Example:
        >>> build_command(BuildSettings())
        ['docker', 'build', '--build-arg', 'UID=1000', '--build-arg',
         'RUN_AS_USER=appuser', '-t', 'torrust-tracker', '.']
    """
    return [
        BUILD_TOOL,
        "build",
        "--build-arg",
        f"{UID_BUILD_ARG}={settings.user_uid}",
        "--build-arg",
        f"{RUN_AS_USER_BUILD_ARG}={settings.run_as_user}",
        "-t",
        IMAGE_TAG,
        BUILD_CONTEXT,
    ]


def status_lines(settings: BuildSettings) -> list[str]:
    return [
        "Building docker image ...",
        f"TORRUST_TRACKER_USER_UID: {settings.user_uid}",
        f"TORRUST_TRACKER_RUN_AS_USER: {settings.run_as_user}",
    ]


def write_line(console: Console, line: str) -> None:
    """Write a line to the console's file untouched (rich would expand tabs)."""
    console.file.write(line + "\n")
    console.file.flush()


def announce(settings: BuildSettings, console: Console) -> None:
    """Print the status lines exactly as resolved."""
    for line in status_lines(settings):
        write_line(console, line)


def run_build(command: list[str]) -> int:
    """Run the build tool once and return its exit status.

    Args:
        command: Full argument list, executable first

    Returns:
        The build tool's exit status, or 128+N if it was killed by signal N

    Raises:
        BuildToolNotFoundError: If the executable does not exist
        BuildToolNotExecutableError: If the executable cannot be run
    """
    logger.debug(f"Running: {' '.join(command)}")

    try:
        result = subprocess.run(command)
    except FileNotFoundError as e:
        raise BuildToolNotFoundError(f"{command[0]}: command not found") from e
    except PermissionError as e:
        raise BuildToolNotExecutableError(
            f"{command[0]}: permission denied"
        ) from e

    logger.debug(f"{command[0]} exited with status {result.returncode}")

    # Killed by signal N: report 128+N like a shell does
    if result.returncode < 0:
        return 128 - result.returncode
    return result.returncode


def build_image(
    settings: BuildSettings | None = None, console: Console | None = None
) -> int:
    """Build the tracker image.

    Args:
        settings: Resolved settings (read fresh from the environment if omitted)
        console: Console for the status lines (stdout if omitted)

    Returns:
        Exit status of the build tool
    """
    settings = settings or BuildSettings()
    console = console or Console()

    logger.debug(
        f"Resolved user_uid={settings.user_uid!r} run_as_user={settings.run_as_user!r}"
    )

    announce(settings, console)
    return run_build(build_command(settings))
