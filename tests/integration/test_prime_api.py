"""Integration test for the PrimeApi facade: login, then fetch with the token."""

import pytest
from prime_client import PrimeApi
from prime_client.auth import AuthRequest
from tests.stubs import BASE_URL, attendance_payload


@pytest.mark.asyncio
@pytest.mark.integration
async def test_login_then_fetch_attendance(router):
    router.add("POST", "/auth/login", 200, {"accessToken": "access-1", "roles": []})
    router.add("GET", "/attendance", 200, [attendance_payload()])
    api = PrimeApi(base_url=BASE_URL, transport=router.transport)

    tokens = await api.auth.login(AuthRequest(email="agent@example.com", password="pw"))
    records = await api.attendance.get_all(tokens.access_token)

    assert len(records) == 1
    assert router.last_request.headers["Authorization"] == "Bearer access-1"


@pytest.mark.integration
def test_domain_apis_share_configuration(router):
    api = PrimeApi(base_url=BASE_URL, timeout=2.5, transport=router.transport)

    for domain in (api.auth, api.attendance, api.clients, api.performance):
        assert domain.base_url == BASE_URL
        assert domain.timeout == 2.5
        assert domain.transport is api.auth.transport
