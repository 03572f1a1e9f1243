"""HTTP service mode for iconbuild."""

from .app import create_app

__all__ = ["create_app"]
