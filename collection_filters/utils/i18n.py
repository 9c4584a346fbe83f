"""Locale resolution from the URL path prefix."""

from typing import Optional

from ..config import Settings
from ..models import Locale, UnknownLocale


def get_locale_from_prefix(prefix: Optional[str], settings: Settings) -> Locale:
    """
    Resolve the storefront locale for a ``{language}-{country}`` path prefix.

    No prefix means the default locale. Prefixes are matched case-insensitively
    against the configured locales; anything else raises ``UnknownLocale``.
    """
    key = (prefix or settings.default_locale).lower()
    config = settings.locales.get(key)
    if config is None:
        raise UnknownLocale(f"Unknown locale '{prefix}'")

    return Locale(
        language=config["language"],
        country=config["country"],
        currency=config["currency"],
        pathPrefix="" if prefix is None else f"/{key}",
    )
