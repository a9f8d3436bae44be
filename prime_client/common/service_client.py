"""Reusable async HTTP client for the back-office REST API.

Every domain API (auth, attendance, clients, performance) goes through
``ServiceClient.request`` so headers, timeouts, and error translation live in
one place.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
from prime_client.common.config import get_settings
from prime_client.common.logging import get_logger

logger = get_logger(__name__)

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

DEFAULT_ERROR_MESSAGE = "An error occurred"


def create_auth_headers(access_token: str) -> dict[str, str]:
    """JSON headers plus the bearer token."""
    headers = dict(DEFAULT_HEADERS)
    headers["Authorization"] = f"Bearer {access_token}"
    return headers


class ApiError(Exception):
    """A non-2xx response from the backend."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        response_data: Optional[dict] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.code = code
        self.response_data = response_data or {}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ApiError(status_code={self.status_code!r}, message={self.message!r})"


def api_error_from_response(response: httpx.Response) -> ApiError:
    """Build an ``ApiError`` from a failed response, tolerating non-JSON bodies."""
    try:
        data = response.json()
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {}

    message = data.get("message") or data.get("error") or DEFAULT_ERROR_MESSAGE
    code = data.get("code") or data.get("errorCode")
    return ApiError(
        message=message,
        status_code=response.status_code,
        code=code,
        response_data=data,
    )


class ServiceClient:
    """Base client for making authenticated requests to the backend."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = settings.API_TIMEOUT if timeout is None else timeout
        self.transport = transport

    def build_headers(self, token: Optional[str] = None) -> dict[str, str]:
        if token:
            return create_auth_headers(token)
        return dict(DEFAULT_HEADERS)

    async def request(
        self,
        method: str,
        path: str,
        *,
        token: Optional[str] = None,
        json: Any = None,
        params: Optional[dict] = None,
    ) -> httpx.Response:
        """Send a request and return the response.

        Raises:
            ApiError: the backend answered with a non-2xx status.
            httpx.RequestError: the request never got a response.
        """
        url = f"{self.base_url}{path}"

        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            response = await client.request(
                method,
                url,
                headers=self.build_headers(token),
                json=json,
                params=params,
            )

        if not response.is_success:
            error = api_error_from_response(response)
            logger.warning(
                "API error: %s %s -> %s %s",
                method,
                path,
                response.status_code,
                error.message,
            )
            raise error

        return response

    async def _request_json(self, method: str, path: str, **kwargs) -> Any:
        response = await self.request(method, path, **kwargs)
        if not response.content:
            return None
        return response.json()

    async def get(
        self, path: str, *, token: Optional[str] = None, params: Optional[dict] = None
    ) -> Any:
        """Make GET request."""
        return await self._request_json("GET", path, token=token, params=params)

    async def post(
        self, path: str, *, token: Optional[str] = None, json: Any = None
    ) -> Any:
        """Make POST request."""
        return await self._request_json("POST", path, token=token, json=json)

    async def put(
        self, path: str, *, token: Optional[str] = None, json: Any = None
    ) -> Any:
        """Make PUT request."""
        return await self._request_json("PUT", path, token=token, json=json)

    async def delete(self, path: str, *, token: Optional[str] = None) -> Any:
        """Make DELETE request."""
        return await self._request_json("DELETE", path, token=token)
