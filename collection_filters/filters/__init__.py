"""Filter parsing, sorting and applied-filter reconciliation."""

from .parser import parse_product_filters, FILTER_URL_PREFIX
from .sort import get_sort_values_from_param
from .reconciler import (
    reconcile_applied_filters,
    flatten_filter_values,
    deserialize_filter_input,
    filters_match,
    price_label,
    PRICE_FILTER_ID,
)

__all__ = [
    "parse_product_filters",
    "FILTER_URL_PREFIX",
    "get_sort_values_from_param",
    "reconcile_applied_filters",
    "flatten_filter_values",
    "deserialize_filter_input",
    "filters_match",
    "price_label",
    "PRICE_FILTER_ID",
]
