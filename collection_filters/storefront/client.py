"""Async client for the Shopify Storefront GraphQL API."""

import logging
from typing import Any, Dict, List, Optional, Union

import httpx

from ..models import FilterCriterion, Locale, SortSpec, StorefrontError
from .queries import COLLECTION_QUERY

logger = logging.getLogger(__name__)


class StorefrontClient:
    """Executes Storefront API queries over a shared ``httpx.AsyncClient``."""

    def __init__(
        self,
        store_domain: str,
        access_token: str = "",
        api_version: str = "2024-04",
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.store_domain = store_domain
        self.access_token = access_token
        self.api_version = api_version
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    @property
    def endpoint(self) -> str:
        return f"https://{self.store_domain}/api/{self.api_version}/graphql.json"

    async def query(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST a GraphQL document and return its ``data``.

        Raises ``StorefrontError`` on transport failures, non-2xx responses and
        GraphQL ``errors``.
        """
        headers = {"Content-Type": "application/json"}
        if self.access_token:
            headers["X-Shopify-Storefront-Access-Token"] = self.access_token

        try:
            response = await self._client.post(
                self.endpoint,
                json={"query": query, "variables": variables},
                headers=headers,
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Storefront API returned {e.response.status_code}")
            raise StorefrontError(f"Storefront API returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"Storefront API request failed: {e}")
            raise StorefrontError("Storefront API request failed") from e
        except ValueError as e:
            raise StorefrontError("Storefront API returned invalid JSON") from e

        if payload.get("errors"):
            messages = "; ".join(error.get("message", "") for error in payload["errors"])
            logger.error(f"Storefront API GraphQL errors: {messages}")
            raise StorefrontError(f"Storefront API errors: {messages}")

        return payload.get("data") or {}

    async def query_collection(
        self,
        handle: str,
        filters: List[FilterCriterion],
        sort: SortSpec,
        pagination: Dict[str, Union[int, Optional[str]]],
        locale: Locale,
    ) -> Dict[str, Any]:
        """Fetch a collection page; ``collection`` is None when the handle is unknown."""
        variables = {
            **pagination,
            "handle": handle,
            "filters": [criterion.model_dump(exclude_none=True) for criterion in filters],
            "sortKey": sort.sortKey.value,
            "reverse": sort.reverse,
            "country": locale.country,
            "language": locale.language,
        }
        data = await self.query(COLLECTION_QUERY, variables)
        return {
            "collection": data.get("collection"),
            "collections": data.get("collections"),
        }

    async def aclose(self) -> None:
        await self._client.aclose()
