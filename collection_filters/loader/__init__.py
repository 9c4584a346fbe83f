"""Collection page loading."""

from .collection_loader import CollectionLoader

__all__ = [
    "CollectionLoader",
]
