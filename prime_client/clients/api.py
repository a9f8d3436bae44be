"""Client and policy endpoints."""

from typing import List

from pydantic import TypeAdapter
from prime_client.clients.schemas import (
    ClientRequest,
    ClientResponse,
    ClientUpdate,
    InsuranceType,
    PolicyStatus,
)
from prime_client.common.service_client import ServiceClient

CLIENTS_PATH = "/clients"
BY_INSURANCE_TYPE_PATH = "/clients/insurance-type"
BY_POLICY_STATUS_PATH = "/clients/policy-status"
EXPIRING_POLICIES_PATH = "/clients/expiring-policies"

_client_list = TypeAdapter(List[ClientResponse])


def client_path(client_id: int) -> str:
    return f"{CLIENTS_PATH}/{client_id}"


class ClientsApi(ServiceClient):
    """CRUD and policy queries over an agent's clients."""

    async def get_all(self, access_token: str) -> List[ClientResponse]:
        payload = await self.get(CLIENTS_PATH, token=access_token)
        return _client_list.validate_python(payload)

    async def get_by_id(self, access_token: str, client_id: int) -> ClientResponse:
        payload = await self.get(client_path(client_id), token=access_token)
        return ClientResponse.model_validate(payload)

    async def create(self, access_token: str, data: ClientRequest) -> ClientResponse:
        payload = await self.post(
            CLIENTS_PATH, token=access_token, json=data.to_payload()
        )
        return ClientResponse.model_validate(payload)

    async def update(
        self, access_token: str, client_id: int, data: ClientUpdate
    ) -> ClientResponse:
        payload = await self.put(
            client_path(client_id), token=access_token, json=data.to_payload()
        )
        return ClientResponse.model_validate(payload)

    async def delete_client(self, access_token: str, client_id: int) -> None:
        await self.delete(client_path(client_id), token=access_token)

    async def get_by_insurance_type(
        self, access_token: str, insurance_type: InsuranceType
    ) -> List[ClientResponse]:
        payload = await self.get(
            f"{BY_INSURANCE_TYPE_PATH}/{InsuranceType(insurance_type).value}",
            token=access_token,
        )
        return _client_list.validate_python(payload)

    async def get_by_policy_status(
        self, access_token: str, status: PolicyStatus
    ) -> List[ClientResponse]:
        payload = await self.get(
            f"{BY_POLICY_STATUS_PATH}/{PolicyStatus(status).value}",
            token=access_token,
        )
        return _client_list.validate_python(payload)

    async def get_expiring_policies(self, access_token: str) -> List[ClientResponse]:
        """Clients whose policies expire within the renewal window."""
        payload = await self.get(EXPIRING_POLICIES_PATH, token=access_token)
        return _client_list.validate_python(payload)
