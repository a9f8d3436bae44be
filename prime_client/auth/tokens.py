"""Bearer header construction and local JWT inspection.

The backend is the only authority on token validity; these helpers read the
claims without verifying the signature so a caller can refresh proactively.
"""

from datetime import datetime, timezone

from jose import JWTError, jwt
from prime_client.common.service_client import create_auth_headers

__all__ = ["create_auth_headers", "decode_token_claims", "is_token_expired"]


def decode_token_claims(token: str) -> dict:
    """Return the token's claims without verifying its signature.

    Raises:
        JWTError: the token is not a well-formed JWT.
    """
    return jwt.get_unverified_claims(token)


def is_token_expired(token: str, *, now: datetime) -> bool:
    """Whether the ``exp`` claim is at or before ``now``.

    A token without ``exp`` never expires; a token that cannot be decoded, or
    whose ``exp`` is not a usable timestamp, is treated as expired.
    """
    try:
        claims = decode_token_claims(token)
    except JWTError:
        return True

    exp = claims.get("exp")
    if exp is None:
        return False

    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    try:
        expires_at = datetime.fromtimestamp(exp, tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        # Non-numeric or out-of-range exp
        return True
    return expires_at <= now
