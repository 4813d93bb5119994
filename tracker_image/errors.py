"""
Tracker image build errors.
"""


class ImageBuildError(Exception):
    """Base exception for all image build errors."""

    exit_code: int = 1


class BuildToolNotFoundError(ImageBuildError):
    """The build tool executable could not be found."""

    exit_code = 127


class BuildToolNotExecutableError(ImageBuildError):
    """The build tool was found but could not be executed."""

    exit_code = 126
