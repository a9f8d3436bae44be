"""Client-side format checks run before a request is sent."""

import re
from typing import Annotated

from pydantic import AfterValidator

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# E.164: optional "+", no leading zero, at most 15 digits
PHONE_PATTERN = re.compile(r"^\+?[1-9]\d{1,14}$")


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(email))


def is_valid_phone_number(phone: str) -> bool:
    return bool(PHONE_PATTERN.fullmatch(phone))


def _check_phone_number(value: str) -> str:
    if not is_valid_phone_number(value):
        raise ValueError("Invalid phone number format")
    return value


PhoneNumber = Annotated[str, AfterValidator(_check_phone_number)]
