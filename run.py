"""Run script for the collection filters service."""

import uvicorn
from collection_filters.api.main import app
from collection_filters.config.settings import get_settings

if __name__ == "__main__":
    settings = get_settings()
    
    print("🚀 Starting Collection Filters service")
    print(f"📍 Running on http://{settings.api_host}:{settings.api_port}")
    print(f"🛒 Storefront: {settings.store_domain}")
    
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False
    )
