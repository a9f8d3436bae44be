"""Authentication endpoints."""

from prime_client.auth.schemas import AuthRequest, AuthResponse, RegisterRequest
from prime_client.common.logging import get_logger
from prime_client.common.service_client import ApiError, ServiceClient

logger = get_logger(__name__)

REGISTER_PATH = "/auth/register"
LOGIN_PATH = "/auth/login"
REFRESH_TOKEN_PATH = "/auth/refresh-token"
VALIDATE_TOKEN_PATH = "/auth/validate-token"


class AuthApi(ServiceClient):
    """Register, log in, refresh, and validate tokens."""

    async def register(self, data: RegisterRequest) -> AuthResponse:
        payload = await self.post(REGISTER_PATH, json=data.to_payload())
        return AuthResponse.model_validate(payload)

    async def login(self, data: AuthRequest) -> AuthResponse:
        payload = await self.post(LOGIN_PATH, json=data.to_payload())
        return AuthResponse.model_validate(payload)

    async def refresh_token(self, refresh_token: str) -> AuthResponse:
        """Exchange a refresh token (sent as the bearer) for new tokens."""
        payload = await self.post(REFRESH_TOKEN_PATH, token=refresh_token)
        return AuthResponse.model_validate(payload)

    async def validate_token(self, access_token: str) -> bool:
        """Ask the backend whether ``access_token`` is still accepted.

        Any non-2xx answer means "not valid"; transport failures still raise.
        """
        try:
            await self.request("GET", VALIDATE_TOKEN_PATH, token=access_token)
        except ApiError as exc:
            logger.info("Token rejected by backend (status %s)", exc.status_code)
            return False
        return True
