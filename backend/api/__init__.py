"""
Startup Mentor API package.

Provides the FastAPI application for reactions and auth diagnostics.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
