"""Client for the page-builder content service."""

import logging
from typing import Any, Dict, Optional

import httpx

from ..models import Locale, PageContentError

logger = logging.getLogger(__name__)


class PageContentClient:
    """Loads page-builder content for storefront pages.

    With no ``base_url`` configured, ``load_page`` returns None.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 5.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/") if base_url else None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def load_page(self, page_type: str, handle: str, locale: Locale) -> Optional[Dict[str, Any]]:
        if not self.base_url:
            return None

        body = {
            "type": page_type,
            "handle": handle,
            "locale": {"language": locale.language, "country": locale.country},
        }
        try:
            response = await self._client.post(f"{self.base_url}/pages", json=body)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            logger.error(f"Failed to load {page_type} page content for {handle}: {e}")
            raise PageContentError(f"Failed to load page content for '{handle}'") from e
        except ValueError as e:
            raise PageContentError("Page content service returned invalid JSON") from e

    async def aclose(self) -> None:
        await self._client.aclose()
