"""Storefront API gateway."""

from .client import StorefrontClient
from .queries import COLLECTION_QUERY

__all__ = [
    "StorefrontClient",
    "COLLECTION_QUERY",
]
