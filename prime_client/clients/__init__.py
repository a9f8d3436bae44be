"""Insurance client records: shapes, API, and policy metrics."""

from prime_client.clients.api import ClientsApi
from prime_client.clients.metrics import calculate_policy_status, years_as_client
from prime_client.clients.schemas import (
    ClientRequest,
    ClientResponse,
    ClientUpdate,
    InsuranceType,
    PolicyMetrics,
    PolicyStatus,
)

__all__ = [
    "ClientRequest",
    "ClientResponse",
    "ClientUpdate",
    "ClientsApi",
    "InsuranceType",
    "PolicyMetrics",
    "PolicyStatus",
    "calculate_policy_status",
    "years_as_client",
]
