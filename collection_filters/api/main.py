"""FastAPI application for the collection filters service."""

import logging
from contextlib import asynccontextmanager
from typing import List, Optional, Tuple

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..content import PageContentClient
from ..loader import CollectionLoader
from ..models import CollectionPageError, CollectionPageResponse, ErrorResponse
from ..storefront import StorefrontClient
from ..utils import get_locale_from_prefix

# Get settings
settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the outbound clients once and close them on shutdown."""
    storefront = StorefrontClient(
        store_domain=settings.store_domain,
        access_token=settings.storefront_api_token,
        api_version=settings.storefront_api_version,
        timeout=settings.storefront_timeout,
    )
    page_content = PageContentClient(
        base_url=settings.page_content_url,
        timeout=settings.page_content_timeout,
    )
    app.state.collection_loader = CollectionLoader(storefront, page_content, settings)
    logger.info(f"Collection loader initialized for {settings.store_domain}")
    try:
        yield
    finally:
        await storefront.aclose()
        await page_content.aclose()


# Create FastAPI app
app = FastAPI(
    title="Collection Filters",
    description="Collection pages with parsed storefront filters and applied-filter labels",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_collection_loader(request: Request) -> CollectionLoader:
    """Dependency returning the app-wide collection loader."""
    return request.app.state.collection_loader


@app.exception_handler(CollectionPageError)
async def collection_page_error_handler(request: Request, exc: CollectionPageError) -> JSONResponse:
    """Render surfaced errors as ``ErrorResponse`` with their status code."""
    logger.info(f"{request.url.path}: {exc.error_code} {exc.message}")
    error = ErrorResponse(message=exc.message, error_code=exc.error_code)
    return JSONResponse(status_code=exc.status_code, content=error.model_dump())


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "Collection Filters"}


async def _load_collection_page(
    request: Request,
    loader: CollectionLoader,
    collection_handle: str,
    locale_prefix: Optional[str],
) -> CollectionPageResponse:
    locale = get_locale_from_prefix(locale_prefix, settings)
    query_params: List[Tuple[str, str]] = request.query_params.multi_items()
    return await loader.load(collection_handle, query_params, str(request.url), locale)


@app.get("/collections/{collection_handle}", response_model=CollectionPageResponse)
async def collection_page(
    collection_handle: str,
    request: Request,
    loader: CollectionLoader = Depends(get_collection_loader),
) -> CollectionPageResponse:
    """
    Load a collection page in the default locale.

    Query parameters: ``cursor``/``direction`` for pagination, ``sort`` for the
    sort order, and ``filter.*`` parameters for product filters.
    """
    return await _load_collection_page(request, loader, collection_handle, None)


@app.get("/{locale}/collections/{collection_handle}", response_model=CollectionPageResponse)
async def localized_collection_page(
    locale: str,
    collection_handle: str,
    request: Request,
    loader: CollectionLoader = Depends(get_collection_loader),
) -> CollectionPageResponse:
    """Load a collection page for a ``{language}-{country}`` locale prefix."""
    return await _load_collection_page(request, loader, collection_handle, locale)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
