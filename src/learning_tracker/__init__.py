"""Learning Tracker core package."""

from __future__ import annotations

from .config import APP_VERSION

__all__ = ["APP_VERSION", "build_application"]
__version__ = APP_VERSION


def build_application(**kwargs):
    from .application import TrackerApplication

    return TrackerApplication(**kwargs)
