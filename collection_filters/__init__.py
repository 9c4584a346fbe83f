"""Collection Filters - storefront collection pages with applied-filter labels."""

__version__ = "1.0.0"

from .filters import parse_product_filters, get_sort_values_from_param, reconcile_applied_filters
from .loader import CollectionLoader
from .models import FilterCriterion, AppliedFilter, CollectionPageResponse

__all__ = [
    "parse_product_filters",
    "get_sort_values_from_param",
    "reconcile_applied_filters",
    "CollectionLoader",
    "FilterCriterion",
    "AppliedFilter",
    "CollectionPageResponse",
    "__version__",
]
