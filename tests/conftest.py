"""Pytest configuration and fixtures for folio.

The Firestore REST API is replaced by httpx.MockTransport: each test queues
canned responses on a FakeFirestore and inspects the real httpx.Request the
client built. No network access.
"""

import httpx
import pytest

from folio.core.config import get_settings
from folio.infrastructure.firebase._rest_client import FirestoreRESTClient, StoreConfig
from tests.firestore_fakes import API_KEY, PROJECT_ID, FakeFirestore


@pytest.fixture
def store_config() -> StoreConfig:
    return StoreConfig(project_id=PROJECT_ID, api_key=API_KEY)


@pytest.fixture
def fake_store() -> FakeFirestore:
    return FakeFirestore()


@pytest.fixture
async def firestore(store_config: StoreConfig, fake_store: FakeFirestore):
    """FirestoreRESTClient wired to fake_store."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(fake_store.handler))
    client = FirestoreRESTClient(store_config, http_client=http)
    yield client
    await http.aclose()


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Minimal valid environment for Settings; cache cleared before and after."""
    monkeypatch.setenv("FIREBASE_PROJECT_ID", PROJECT_ID)
    monkeypatch.setenv("FIREBASE_API_KEY", API_KEY)
    monkeypatch.delenv("FIREBASE_SERVICE_ACCOUNT_KEY", raising=False)
    monkeypatch.delenv("FIREBASE_SERVICE_ACCOUNT_PATH", raising=False)
    monkeypatch.chdir(tmp_path)  # no stray .env
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
async def make_client(store_config: StoreConfig):
    """Factory for clients on a MockTransport handler with extra constructor options."""
    opened: list[httpx.AsyncClient] = []

    def _make(handler, **kwargs) -> FirestoreRESTClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        opened.append(http)
        return FirestoreRESTClient(store_config, http_client=http, **kwargs)

    yield _make
    for http in opened:
        await http.aclose()
