"""Data models for the collection filters service."""

from .filter_models import (
    SortKey,
    SortParam,
    SortSpec,
    PriceRange,
    VariantOption,
    MetafieldValue,
    AvailableFilter,
    PriceFilter,
    VariantOptionFilter,
    ProductMetafieldFilter,
    VariantMetafieldFilter,
    TagFilter,
    ProductVendorFilter,
    ProductTypeFilter,
    FilterCriterion,
    FilterValueCandidate,
    CatalogFilter,
    AppliedFilter,
)
from .page_models import (
    Locale,
    SeoPayload,
    CollectionPageResponse,
    ErrorResponse,
    CollectionPageError,
    MissingCollectionHandle,
    UnknownLocale,
    CollectionNotFound,
    StorefrontError,
    PageContentError,
)

__all__ = [
    "SortKey",
    "SortParam",
    "SortSpec",
    "PriceRange",
    "VariantOption",
    "MetafieldValue",
    "AvailableFilter",
    "PriceFilter",
    "VariantOptionFilter",
    "ProductMetafieldFilter",
    "VariantMetafieldFilter",
    "TagFilter",
    "ProductVendorFilter",
    "ProductTypeFilter",
    "FilterCriterion",
    "FilterValueCandidate",
    "CatalogFilter",
    "AppliedFilter",
    "Locale",
    "SeoPayload",
    "CollectionPageResponse",
    "ErrorResponse",
    "CollectionPageError",
    "MissingCollectionHandle",
    "UnknownLocale",
    "CollectionNotFound",
    "StorefrontError",
    "PageContentError",
]
