import pytest

from nearmatch.config.settings import Settings
from nearmatch.services import presence
from nearmatch.store.memory import InMemoryStore


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def go_active(store, settings):
    """Log a user in (if needed) and activate them."""

    def _go(email, mode="visible", lat=0.0, lon=0.0):
        presence.get_or_create_user(store, email)
        return presence.activate(store, email, mode=mode, latitude=lat, longitude=lon, settings=settings)

    return _go
