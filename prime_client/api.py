"""Single entry point bundling every domain API over one configuration."""

from typing import Optional

import httpx
from prime_client.attendance.api import AttendanceApi
from prime_client.auth.api import AuthApi
from prime_client.clients.api import ClientsApi
from prime_client.performance.api import PerformanceApi


class PrimeApi:
    """
    Facade over the back-office API.

    Usage:
        api = PrimeApi()
        tokens = await api.auth.login(AuthRequest(email=..., password=...))
        records = await api.attendance.get_all(tokens.access_token)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        options = {"base_url": base_url, "timeout": timeout, "transport": transport}
        self.auth = AuthApi(**options)
        self.attendance = AttendanceApi(**options)
        self.clients = ClientsApi(**options)
        self.performance = PerformanceApi(**options)
