from __future__ import annotations

from typing import Any, AsyncIterator

from scheduler_client.core.pagination import request_resources
from scheduler_client.schemas.calls import (
    Call,
    CallHistory,
    CallSchedule,
    CreateCallRequest,
    DeleteCallRequest,
    DeleteCallScheduleRequest,
    ExecuteCallRequest,
    GetCallRequest,
    ListCallHistoriesRequest,
    ListCallHistoriesResponse,
    ListCallScheduleHistoriesRequest,
    ListCallSchedulesRequest,
    ListCallSchedulesResponse,
    ListCallsRequest,
    ListCallsResponse,
    ScheduleCallRequest,
)
from scheduler_client.services.base import SchedulerOperations


class CallsService(SchedulerOperations):
    """Scheduler v1 calls API"""

    async def create(self, request: CreateCallRequest) -> Call:
        return await self._post(request, Call, "calls")

    async def delete(self, request: DeleteCallRequest) -> None:
        await self._delete(request, "calls", request.call_id)

    async def delete_schedule(self, request: DeleteCallScheduleRequest) -> None:
        await self._delete(request, "calls", request.call_id, "schedules", request.schedule_id)

    async def execute(self, request: ExecuteCallRequest) -> CallHistory:
        return await self._post(request, CallHistory, "calls", request.call_id, "execute")

    async def get(self, request: GetCallRequest) -> Call:
        return await self._get(request, Call, "calls", request.call_id)

    async def list(self, request: ListCallsRequest) -> ListCallsResponse:
        return await self._get(request, ListCallsResponse, "calls")

    async def list_histories(self, request: ListCallHistoriesRequest) -> ListCallHistoriesResponse:
        return await self._get(request, ListCallHistoriesResponse, "calls", request.call_id, "history")

    async def list_schedule_histories(
        self, request: ListCallScheduleHistoriesRequest
    ) -> ListCallHistoriesResponse:
        return await self._get(
            request,
            ListCallHistoriesResponse,
            "calls",
            request.call_id,
            "schedules",
            request.schedule_id,
            "history",
        )

    async def list_schedules(self, request: ListCallSchedulesRequest) -> ListCallSchedulesResponse:
        return await self._get(request, ListCallSchedulesResponse, "calls", request.call_id, "schedules")

    async def schedule(self, request: ScheduleCallRequest) -> CallSchedule:
        return await self._post(request, CallSchedule, "calls", request.call_id, "schedules")

    # 以下方法遍历全部分页，request.page 会被逐页覆盖

    def list_all(self, request: ListCallsRequest, **kwargs: Any) -> AsyncIterator[Call]:
        return request_resources(
            lambda page: self.list(request.model_copy(update={"page": page})), **kwargs
        )

    def list_all_histories(self, request: ListCallHistoriesRequest, **kwargs: Any) -> AsyncIterator[CallHistory]:
        return request_resources(
            lambda page: self.list_histories(request.model_copy(update={"page": page})), **kwargs
        )

    def list_all_schedule_histories(
        self, request: ListCallScheduleHistoriesRequest, **kwargs: Any
    ) -> AsyncIterator[CallHistory]:
        return request_resources(
            lambda page: self.list_schedule_histories(request.model_copy(update={"page": page})), **kwargs
        )

    def list_all_schedules(self, request: ListCallSchedulesRequest, **kwargs: Any) -> AsyncIterator[CallSchedule]:
        return request_resources(
            lambda page: self.list_schedules(request.model_copy(update={"page": page})), **kwargs
        )
