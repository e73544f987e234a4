"""HTTP upload API."""

from moodboard.webapp.app import create_app

__all__ = ["create_app"]
