"""Typed async client and derived-metric helpers for the Prime agency API."""

from prime_client.api import PrimeApi
from prime_client.common.errors import (
    DivisionByZeroError,
    InvalidIntervalError,
    MetricsError,
    MissingInputError,
    MixedTimezoneError,
)
from prime_client.common.service_client import ApiError, ServiceClient

__all__ = [
    "ApiError",
    "DivisionByZeroError",
    "InvalidIntervalError",
    "MetricsError",
    "MissingInputError",
    "MixedTimezoneError",
    "PrimeApi",
    "ServiceClient",
]
