"""Performance review endpoints."""

from datetime import date
from typing import List, Optional

from pydantic import TypeAdapter
from prime_client.common.datetime_utils import format_date_for_api
from prime_client.common.service_client import ServiceClient
from prime_client.performance.schemas import (
    FeedbackRequest,
    PerformanceRequest,
    PerformanceResponse,
    PerformanceTrend,
    PerformanceUpdate,
)

PERFORMANCE_PATH = "/performance"
TEAM_PATH = "/performance/team"
TREND_PATH = "/performance/trend"

_performance_list = TypeAdapter(List[PerformanceResponse])
_trend_list = TypeAdapter(List[PerformanceTrend])


def performance_path(performance_id: int) -> str:
    return f"{PERFORMANCE_PATH}/{performance_id}"


def feedback_path(performance_id: int) -> str:
    return f"{PERFORMANCE_PATH}/{performance_id}/feedback"


class PerformanceApi(ServiceClient):
    """Performance records for agents and their managers."""

    async def get_all(self, access_token: str) -> List[PerformanceResponse]:
        payload = await self.get(PERFORMANCE_PATH, token=access_token)
        return _performance_list.validate_python(payload)

    async def get_by_id(
        self, access_token: str, performance_id: int
    ) -> PerformanceResponse:
        payload = await self.get(performance_path(performance_id), token=access_token)
        return PerformanceResponse.model_validate(payload)

    async def create(
        self, access_token: str, data: PerformanceRequest
    ) -> PerformanceResponse:
        payload = await self.post(
            PERFORMANCE_PATH, token=access_token, json=data.to_payload()
        )
        return PerformanceResponse.model_validate(payload)

    async def update(
        self, access_token: str, performance_id: int, data: PerformanceUpdate
    ) -> PerformanceResponse:
        payload = await self.put(
            performance_path(performance_id),
            token=access_token,
            json=data.to_payload(),
        )
        return PerformanceResponse.model_validate(payload)

    async def get_team_performance(
        self, access_token: str, start_date: date, end_date: date
    ) -> List[PerformanceResponse]:
        """Team performance between two dates (managers only)."""
        payload = await self.get(
            TEAM_PATH,
            token=access_token,
            params={
                "startDate": format_date_for_api(start_date),
                "endDate": format_date_for_api(end_date),
            },
        )
        return _performance_list.validate_python(payload)

    async def add_manager_feedback(
        self, access_token: str, performance_id: int, feedback: str
    ) -> PerformanceResponse:
        body = FeedbackRequest(feedback=feedback)
        payload = await self.put(
            feedback_path(performance_id), token=access_token, json=body.to_payload()
        )
        return PerformanceResponse.model_validate(payload)

    async def get_performance_trend(
        self,
        access_token: str,
        start_date: date,
        end_date: date,
        agent_id: Optional[int] = None,
    ) -> List[PerformanceTrend]:
        """Monthly average scores for an agent; defaults to the caller."""
        params = {
            "startDate": format_date_for_api(start_date),
            "endDate": format_date_for_api(end_date),
        }
        if agent_id is not None:
            params["agentId"] = agent_id
        payload = await self.get(TREND_PATH, token=access_token, params=params)
        return _trend_list.validate_python(payload)
