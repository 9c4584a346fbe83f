"""Core filter data models."""

from typing import List, Any, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, model_serializer
from enum import Enum


class SortKey(str, Enum):
    """Storefront product-collection sort keys."""
    PRICE = "PRICE"
    BEST_SELLING = "BEST_SELLING"
    CREATED = "CREATED"
    MANUAL = "MANUAL"
    RELEVANCE = "RELEVANCE"


class SortParam(str, Enum):
    """Sort tokens accepted in the ``sort`` query parameter."""
    PRICE_HIGH_LOW = "price-high-low"
    PRICE_LOW_HIGH = "price-low-high"
    BEST_SELLING = "best-selling"
    NEWEST = "newest"
    FEATURED = "featured"


class SortSpec(BaseModel):
    """Resolved sort key and direction."""
    sortKey: SortKey = Field(..., description="Storefront sort key")
    reverse: bool = Field(default=False, description="Reverse the sort order")


class _CriterionModel(BaseModel):
    """Base for filter criteria; unknown fields make validation fail."""
    model_config = ConfigDict(extra="forbid")


class PriceRange(_CriterionModel):
    """Price bounds, either side optional."""
    min: Optional[float] = Field(None, description="Lower price bound")
    max: Optional[float] = Field(None, description="Upper price bound")

    @model_serializer(mode="wrap")
    def _omit_unset_bounds(self, handler):
        # Matches the ProductFilter sent to the Storefront API.
        return {name: value for name, value in handler(self).items() if value is not None}


class VariantOption(_CriterionModel):
    """Variant option name/value pair, e.g. Color/Red."""
    name: str = Field(..., description="Option name")
    value: str = Field(..., description="Option value")


class MetafieldValue(_CriterionModel):
    """Metafield namespace, key and value."""
    namespace: str = Field(..., description="Metafield namespace")
    key: str = Field(..., description="Metafield key")
    value: str = Field(..., description="Metafield value")


class AvailableFilter(_CriterionModel):
    available: bool


class PriceFilter(_CriterionModel):
    price: PriceRange


class VariantOptionFilter(_CriterionModel):
    variantOption: VariantOption


class ProductMetafieldFilter(_CriterionModel):
    productMetafield: MetafieldValue


class VariantMetafieldFilter(_CriterionModel):
    variantMetafield: MetafieldValue


class TagFilter(_CriterionModel):
    tag: str


class ProductVendorFilter(_CriterionModel):
    productVendor: str


class ProductTypeFilter(_CriterionModel):
    productType: str


# One member per ProductFilter kind; field names match the Storefront API input.
FilterCriterion = Union[
    AvailableFilter,
    PriceFilter,
    VariantOptionFilter,
    ProductMetafieldFilter,
    VariantMetafieldFilter,
    TagFilter,
    ProductVendorFilter,
    ProductTypeFilter,
]


class FilterValueCandidate(BaseModel):
    """A filter value enumerated by the catalog for the current collection."""
    id: str = Field(..., description="Filter value identifier")
    label: str = Field(..., description="Human-readable label")
    input: Any = Field(..., description="Serialized ProductFilter for this value")
    count: Optional[int] = Field(None, description="Number of matching products")


class CatalogFilter(BaseModel):
    """A filter group returned with the collection products."""
    id: str = Field(..., description="Filter identifier, e.g. filter.v.price")
    label: str = Field(..., description="Human-readable label")
    type: Optional[str] = Field(None, description="Filter type (LIST, PRICE_RANGE, BOOLEAN)")
    values: List[FilterValueCandidate] = Field(default_factory=list, description="Candidate values")


class AppliedFilter(BaseModel):
    """A parsed filter paired with the label shown as an active filter chip."""
    filter: FilterCriterion = Field(..., description="Applied filter criterion")
    label: str = Field(..., description="Display label")
