"""Configuration settings."""

from typing import Dict, Optional
from pydantic_settings import BaseSettings


DEFAULT_LOCALES: Dict[str, Dict[str, str]] = {
    "en-us": {"language": "EN", "country": "US", "currency": "USD"},
    "en-ca": {"language": "EN", "country": "CA", "currency": "CAD"},
    "fr-ca": {"language": "FR", "country": "CA", "currency": "CAD"},
    "en-gb": {"language": "EN", "country": "GB", "currency": "GBP"},
    "de-de": {"language": "DE", "country": "DE", "currency": "EUR"},
    "fr-fr": {"language": "FR", "country": "FR", "currency": "EUR"},
}


class Settings(BaseSettings):
    """Application settings."""

    # Storefront API
    store_domain: str = "mock.shop"
    storefront_api_token: str = ""
    storefront_api_version: str = "2024-04"
    storefront_timeout: float = 10.0

    # Page-builder content service, disabled when unset
    page_content_url: Optional[str] = None
    page_content_timeout: float = 5.0

    # Collection page
    pagination_size: int = 16
    filter_url_prefix: str = "filter."
    default_locale: str = "en-us"
    locales: Dict[str, Dict[str, str]] = DEFAULT_LOCALES

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra fields from .env


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
