"""
Tracker Image - Build the Torrust tracker container image.

Resolves the in-image user id and username from the environment, falling back
to fixed defaults, and runs ``docker build`` with them as build arguments.
The build tool's exit status is passed through unchanged.
"""

from .builder import build_command, build_image, run_build
from .errors import BuildToolNotExecutableError, BuildToolNotFoundError, ImageBuildError
from .settings import BuildSettings, get_settings, reload_settings

__version__ = "0.1.0"
__all__ = [
    "BuildSettings",
    "BuildToolNotExecutableError",
    "BuildToolNotFoundError",
    "ImageBuildError",
    "build_command",
    "build_image",
    "get_settings",
    "reload_settings",
    "run_build",
]
