import pytest

from collection_filters.config import Settings
from collection_filters.models import Locale


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def locale():
    return Locale(language="EN", country="US", currency="USD")


@pytest.fixture
def fr_ca_locale():
    return Locale(language="FR", country="CA", currency="CAD", pathPrefix="/fr-ca")
