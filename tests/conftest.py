import pytest
from prime_client.common.config import get_settings
from tests.stubs import BASE_URL, StubRouter


@pytest.fixture
def router() -> StubRouter:
    return StubRouter()


@pytest.fixture
def api_options(router) -> dict:
    """Constructor kwargs pointing any API class at the stub router."""
    return {"base_url": BASE_URL, "transport": router.transport}


@pytest.fixture
def fresh_settings(monkeypatch):
    """
    Clear cached settings before and after a test that changes env vars.
    """
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
