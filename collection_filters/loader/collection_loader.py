"""Collection page loader: sort, filters, storefront query, applied filters."""

import asyncio
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from ..config import Settings
from ..content import PageContentClient
from ..filters import (
    flatten_filter_values,
    get_sort_values_from_param,
    parse_product_filters,
    reconcile_applied_filters,
)
from ..models import (
    CatalogFilter,
    CollectionNotFound,
    CollectionPageResponse,
    Locale,
    MissingCollectionHandle,
)
from ..storefront import StorefrontClient
from ..utils import collection_seo, flatten_connection, get_pagination_variables

logger = logging.getLogger(__name__)

PAGE_TYPE = "COLLECTION"


def _first_values(entries: Iterable[Tuple[str, str]]) -> Dict[str, str]:
    """Map each query key to its first value."""
    params: Dict[str, str] = {}
    for key, value in entries:
        params.setdefault(key, value)
    return params


def _catalog_filters(collection: Mapping[str, Any]) -> List[CatalogFilter]:
    products = collection.get("products")
    groups = products.get("filters") if isinstance(products, Mapping) else None
    if not isinstance(groups, list):
        return []
    catalog = []
    for group in groups:
        try:
            catalog.append(CatalogFilter.model_validate(group))
        except ValidationError as e:
            logger.warning(f"Skipping malformed catalog filter {group!r}: {e.error_count()} error(s)")
    return catalog


class CollectionLoader:
    """Builds the collection page payload for one request."""

    def __init__(self, storefront: StorefrontClient, page_content: PageContentClient, settings: Settings):
        self.storefront = storefront
        self.page_content = page_content
        self.settings = settings

    async def load(
        self,
        collection_handle: Optional[str],
        query_params: List[Tuple[str, str]],
        url: str,
        locale: Locale,
    ) -> CollectionPageResponse:
        """
        Load a collection page.

        Raises ``MissingCollectionHandle`` for a blank handle and
        ``CollectionNotFound`` when the storefront has no such collection.
        Gateway failures propagate as ``StorefrontError`` / ``PageContentError``.
        """
        if not collection_handle or not collection_handle.strip():
            raise MissingCollectionHandle()

        params = _first_values(query_params)
        pagination = get_pagination_variables(params, self.settings.pagination_size)
        sort = get_sort_values_from_param(params.get("sort"))
        filters = parse_product_filters(query_params, self.settings.filter_url_prefix)

        collection_task = asyncio.ensure_future(
            self.storefront.query_collection(collection_handle, filters, sort, pagination, locale)
        )
        content_task = asyncio.ensure_future(
            self.page_content.load_page(PAGE_TYPE, collection_handle, locale)
        )
        try:
            result, page_content = await asyncio.gather(collection_task, content_task)
        except BaseException:
            collection_task.cancel()
            content_task.cancel()
            raise

        collection = result.get("collection")
        if not collection:
            raise CollectionNotFound(collection_handle)

        filter_values = flatten_filter_values(_catalog_filters(collection))
        applied_filters = reconcile_applied_filters(filters, filter_values, locale)

        logger.info(
            f"Loaded collection {collection_handle}: "
            f"{len(applied_filters)} of {len(filters)} filter(s) applied, sort={sort.sortKey.value}"
        )

        return CollectionPageResponse(
            collection=collection,
            appliedFilters=applied_filters,
            collections=flatten_connection(result.get("collections")),
            sort=sort,
            seo=collection_seo(collection, url),
            pageContent=page_content,
        )
