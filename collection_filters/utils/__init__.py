"""Utilities for the collection filters service."""

from .currency import format_currency
from .i18n import get_locale_from_prefix
from .pagination import get_pagination_variables, flatten_connection
from .seo import collection_seo, truncate

__all__ = [
    "format_currency",
    "get_locale_from_prefix",
    "get_pagination_variables",
    "flatten_connection",
    "collection_seo",
    "truncate",
]
