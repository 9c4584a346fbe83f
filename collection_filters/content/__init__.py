"""Page-builder content loading."""

from .client import PageContentClient

__all__ = [
    "PageContentClient",
]
