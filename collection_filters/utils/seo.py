"""SEO metadata for collection pages."""

from typing import Any, Dict, List, Mapping
from urllib.parse import urlsplit

from ..models import SeoPayload
from .pagination import flatten_connection

DESCRIPTION_MAX_LENGTH = 155


def truncate(text: str, length: int = DESCRIPTION_MAX_LENGTH) -> str:
    """Truncate ``text`` to ``length`` characters, ending with an ellipsis when cut."""
    if len(text) <= length:
        return text
    return text[: length - 3] + "..."


def _collection_json_ld(collection: Mapping[str, Any], url: str) -> List[Dict[str, Any]]:
    parts = urlsplit(url)
    origin = f"{parts.scheme}://{parts.netloc}"
    products = flatten_connection(collection.get("products"))

    item_list = [
        {
            "@type": "ListItem",
            "position": index,
            "url": f"{origin}/products/{product.get('handle')}",
        }
        for index, product in enumerate((p for p in products if isinstance(p, Mapping)), start=1)
    ]

    return [
        {
            "@context": "https://schema.org",
            "@type": "BreadcrumbList",
            "itemListElement": [
                {"@type": "ListItem", "position": 1, "name": "Collections", "item": f"{origin}/collections"},
                {"@type": "ListItem", "position": 2, "name": collection.get("title")},
            ],
        },
        {
            "@context": "https://schema.org",
            "@type": "CollectionPage",
            "name": (collection.get("seo") or {}).get("title") or collection.get("title"),
            "description": collection.get("description") or "",
            "url": url,
            "mainEntity": {"@type": "ItemList", "itemListElement": item_list},
        },
    ]


def collection_seo(collection: Mapping[str, Any], url: str) -> SeoPayload:
    """Build SEO metadata for a collection from its seo fields, falling back to title/description."""
    seo = collection.get("seo") or {}
    image = collection.get("image")

    media = None
    if image:
        media = {
            "type": "image",
            "url": image.get("url"),
            "height": image.get("height"),
            "width": image.get("width"),
            "altText": image.get("altText"),
        }

    return SeoPayload(
        title=seo.get("title") or collection.get("title") or "",
        description=truncate(seo.get("description") or collection.get("description") or ""),
        url=url,
        media=media,
        jsonLd=_collection_json_ld(collection, url),
    )
