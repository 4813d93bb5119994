"""
Pytest configuration and fixtures for tracker image tests.
"""

import pytest

from tracker_image import settings

BUILD_ENV_VARS = (
    "TORRUST_TRACKER_USER_UID",
    "TORRUST_TRACKER_RUN_AS_USER",
    "TORRUST_TRACKER_BUILDER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_build_env(monkeypatch):
    """Start every test without build overrides or cached settings."""
    for name in BUILD_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings, "_settings", None)

