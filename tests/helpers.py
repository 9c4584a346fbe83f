"""Shared builders for catalog payloads."""

import json
from typing import Any, Dict, List, Optional

from collection_filters.models import FilterValueCandidate


def candidate(id: str, label: str, input: Dict[str, Any], count: int = 1) -> FilterValueCandidate:
    """A catalog filter value whose input is serialized the way the Storefront API sends it."""
    return FilterValueCandidate(id=id, label=label, input=json.dumps(input), count=count)


def filter_group(id: str, label: str, values: List[Dict[str, Any]], type: str = "LIST") -> Dict[str, Any]:
    return {"id": id, "label": label, "type": type, "values": values}


def filter_value(id: str, label: str, input: Dict[str, Any], count: int = 1) -> Dict[str, Any]:
    return {"id": id, "label": label, "count": count, "input": json.dumps(input)}


def make_collection(
    handle: str = "sale",
    title: str = "Sale",
    filters: Optional[List[Dict[str, Any]]] = None,
    products: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    return {
        "id": f"gid://shopify/Collection/{handle}",
        "handle": handle,
        "title": title,
        "description": f"Everything in {title}",
        "seo": {"title": None, "description": None},
        "image": None,
        "products": {
            "filters": filters if filters is not None else [],
            "nodes": products if products is not None else [{"id": "gid://shopify/Product/1", "handle": "red-shirt"}],
            "pageInfo": {
                "hasPreviousPage": False,
                "hasNextPage": False,
                "startCursor": None,
                "endCursor": None,
            },
        },
    }


def sale_catalog() -> List[Dict[str, Any]]:
    """Catalog with a tag value and a price range, as returned for the sale collection."""
    return [
        filter_group("filter.p.tag", "Tag", [
            filter_value("filter.p.tag.Sale", "On Sale", {"tag": "Sale"}),
            filter_value("filter.p.tag.New", "New Arrivals", {"tag": "New"}),
        ]),
        filter_group("filter.v.price", "Price", [
            filter_value("filter.v.price", "Price", {"price": {"min": 0, "max": 250}}),
        ], type="PRICE_RANGE"),
    ]


def sale_result(collection: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return {
        "collection": collection if collection is not None else make_collection(filters=sale_catalog()),
        "collections": {"edges": [
            {"node": {"title": "Sale", "handle": "sale"}},
            {"node": {"title": "Shirts", "handle": "shirts"}},
        ]},
    }


class FakeStorefront:
    """Stands in for StorefrontClient, recording each query."""

    def __init__(self, result: Optional[Dict[str, Any]] = None, error: Optional[Exception] = None):
        self.result = result if result is not None else sale_result()
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def query_collection(self, handle, filters, sort, pagination, locale):
        self.calls.append({
            "handle": handle,
            "filters": filters,
            "sort": sort,
            "pagination": pagination,
            "locale": locale,
        })
        if self.error is not None:
            raise self.error
        return self.result


class FakePageContent:
    """Stands in for PageContentClient."""

    def __init__(self, payload: Optional[Dict[str, Any]] = None):
        self.payload = payload if payload is not None else {"sections": [{"type": "collection-banner"}]}
        self.calls: List[tuple] = []

    async def load_page(self, page_type, handle, locale):
        self.calls.append((page_type, handle, locale))
        return self.payload
