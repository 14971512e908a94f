"""Command modules for the ghostkit CLI.

This module exports all command groups (Typer apps) that are registered
with the main application.
"""

from .posts import app as posts_app
from .pages import app as pages_app
from .tags import app as tags_app
from .site import app as site_app
from .images import app as images_app

__all__ = [
    "posts_app",
    "pages_app",
    "tags_app",
    "site_app",
    "images_app",
]
