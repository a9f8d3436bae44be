"""Authentication shapes, API, and token helpers."""

from prime_client.auth.api import AuthApi
from prime_client.auth.schemas import AuthRequest, AuthResponse, RegisterRequest, Role
from prime_client.auth.tokens import (
    create_auth_headers,
    decode_token_claims,
    is_token_expired,
)

__all__ = [
    "AuthApi",
    "AuthRequest",
    "AuthResponse",
    "RegisterRequest",
    "Role",
    "create_auth_headers",
    "decode_token_claims",
    "is_token_expired",
]
