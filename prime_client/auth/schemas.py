from typing import List, Optional

from pydantic import EmailStr, Field
from prime_client.common.schemas import CamelModel
from prime_client.common.validation import PhoneNumber


class AuthRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterRequest(CamelModel):
    first_name: str
    last_name: str
    email: EmailStr
    password: str = Field(..., min_length=1)
    phone_number: PhoneNumber


class Role(CamelModel):
    id: int
    name: str


class AuthResponse(CamelModel):
    """Tokens and profile returned by login, register, and refresh."""

    access_token: str
    refresh_token: Optional[str] = None
    token_type: str = "Bearer"
    expires_in: Optional[int] = None  # milliseconds
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    roles: List[Role] = Field(default_factory=list)
    message: Optional[str] = None
    type: Optional[str] = None
