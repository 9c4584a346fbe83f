"""HTTP API for the collection filters service."""

from .main import app

__all__ = [
    "app",
]
