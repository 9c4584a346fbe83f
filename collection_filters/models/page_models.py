"""Collection page request/response models and errors."""

from typing import List, Dict, Any, Optional
from pydantic import BaseModel, Field

from .filter_models import AppliedFilter, SortSpec


class Locale(BaseModel):
    """Active storefront locale."""
    language: str = Field(..., description="Storefront language code, e.g. EN")
    country: str = Field(..., description="Storefront country code, e.g. US")
    currency: str = Field(..., description="ISO 4217 currency code")
    pathPrefix: str = Field(default="", description="URL path prefix, e.g. /fr-ca")

    @property
    def tag(self) -> str:
        """BCP 47 style locale tag, e.g. ``fr_CA``."""
        return f"{self.language.lower()}_{self.country.upper()}"


class SeoPayload(BaseModel):
    """SEO metadata for the collection page."""
    title: str = Field(..., description="Page title")
    titleTemplate: str = Field(default="%s | Collection", description="Title template")
    description: str = Field(default="", description="Meta description")
    url: str = Field(..., description="Canonical URL")
    media: Optional[Dict[str, Any]] = Field(None, description="Share image")
    jsonLd: List[Dict[str, Any]] = Field(default_factory=list, description="Structured data")


class CollectionPageResponse(BaseModel):
    """Success response for a collection page."""
    collection: Dict[str, Any] = Field(..., description="Collection with paginated products")
    appliedFilters: List[AppliedFilter] = Field(default_factory=list, description="Active filter chips")
    collections: List[Dict[str, Any]] = Field(default_factory=list, description="Sibling collections")
    sort: SortSpec = Field(..., description="Resolved sort")
    seo: SeoPayload = Field(..., description="SEO metadata")
    pageContent: Optional[Dict[str, Any]] = Field(None, description="Page-builder content payload")


class ErrorResponse(BaseModel):
    """Error response."""
    type: str = Field(default="error", description="Response type")
    message: str = Field(..., description="Error message")
    error_code: str = Field(..., description="Error code")


class CollectionPageError(Exception):
    """Base for errors surfaced to the caller as a distinct response state."""

    status_code = 500
    error_code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class MissingCollectionHandle(CollectionPageError):
    """Raised when the collection handle path parameter is missing or blank."""

    status_code = 400
    error_code = "MISSING_COLLECTION_HANDLE"

    def __init__(self, message: str = "Missing collectionHandle param"):
        super().__init__(message)


class UnknownLocale(CollectionPageError):
    """Raised when the locale path prefix is not a configured locale."""

    status_code = 404
    error_code = "UNKNOWN_LOCALE"


class CollectionNotFound(CollectionPageError):
    """Raised when the storefront has no collection for the handle."""

    status_code = 404
    error_code = "COLLECTION_NOT_FOUND"

    def __init__(self, handle: str):
        self.handle = handle
        super().__init__(f"Collection '{handle}' not found")


class StorefrontError(CollectionPageError):
    """Raised when the Storefront API call fails or returns GraphQL errors."""

    status_code = 502
    error_code = "STOREFRONT_ERROR"


class PageContentError(CollectionPageError):
    """Raised when the page-content service call fails."""

    status_code = 502
    error_code = "PAGE_CONTENT_ERROR"
