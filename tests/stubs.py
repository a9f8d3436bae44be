import json
from typing import Any, Optional

import httpx

BASE_URL = "http://test/api/v1"
BASE_PATH = "/api/v1"
ACCESS_TOKEN = "access-token"


class StubRouter:
    """
    Mock transport handler that returns canned responses keyed by (method, path).

    Paths are given relative to the API base path. Every request is recorded so
    tests can assert on headers, params, and bodies.
    """

    def __init__(self, routes: Optional[dict[tuple[str, str], tuple[int, Any]]] = None):
        self.routes = dict(routes or {})
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, status_code: int, json_data: Any = None):
        self.routes[(method, path)] = (status_code, json_data)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.startswith(BASE_PATH):
            path = path[len(BASE_PATH):]
        key = (request.method, path)
        if key not in self.routes:
            raise AssertionError(f"Unexpected {request.method} {path}")
        status_code, json_data = self.routes[key]
        return make_response(status_code, json_data)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "No request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


def make_response(status_code: int, json_data: Any = None) -> httpx.Response:
    """
    Build an httpx response; ``None`` gives an empty body, ``str`` a text body.
    """
    if json_data is None:
        return httpx.Response(status_code, content=b"")
    if isinstance(json_data, str):
        return httpx.Response(status_code, text=json_data)
    return httpx.Response(status_code, json=json_data)


def attendance_payload(**overrides) -> dict:
    payload = {
        "id": 1,
        "agentId": 7,
        "agentFirstName": "Aline",
        "agentLastName": "Uwase",
        "agentEmail": "aline@example.com",
        "checkInTime": "2024-05-06T06:45:00",
        "checkOutTime": "2024-05-06T15:45:00",
        "status": "LATE",
        "workLocation": "Head office",
        "totalHoursWorked": 9.0,
        "isLate": True,
        "isEarlyCheckout": False,
        "lateMinutes": 15,
        "createdAt": "2024-05-06T06:45:01",
        "updatedAt": "2024-05-06T15:45:01",
    }
    payload.update(overrides)
    return payload


def client_payload(**overrides) -> dict:
    payload = {
        "id": 11,
        "name": "Eric Mugisha",
        "nationalId": "1198780012345678",
        "email": "eric@example.com",
        "phoneNumber": "+250788000111",
        "location": "Kigali",
        "insuranceType": "AUTO",
        "policyNumber": "POL-0011",
        "policyStartDate": "2023-06-15",
        "policyEndDate": "2024-06-15",
        "premiumAmount": 1200.0,
        "policyStatus": "ACTIVE",
        "agentId": 7,
        "agentFirstName": "Aline",
        "agentLastName": "Uwase",
        "agentEmail": "aline@example.com",
        "createdAt": "2021-03-01T09:00:00",
        "updatedAt": "2024-05-01T09:00:00",
    }
    payload.update(overrides)
    return payload


def performance_payload(**overrides) -> dict:
    payload = {
        "id": 21,
        "agentId": 7,
        "agentFirstName": "Aline",
        "agentLastName": "Uwase",
        "agentEmail": "aline@example.com",
        "periodStart": "2024-04-01",
        "periodEnd": "2024-04-30",
        "newClientsAcquired": 12,
        "policiesRenewed": 4,
        "totalPremiumCollected": 15000.0,
        "salesTarget": 100.0,
        "salesAchieved": 120.0,
        "achievementPercentage": 120.0,
        "clientRetentionRate": 90.0,
        "customerSatisfactionScore": 85.0,
        "rating": "OUTSTANDING",
        "attendanceScore": 95.0,
        "qualityScore": 90.0,
        "overallScore": 101.5,
    }
    payload.update(overrides)
    return payload
