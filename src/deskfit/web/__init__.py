"""HTTP JSON API for deskfit."""

from .app import create_app

__all__ = ["create_app"]
