"""Scheduler calls 资源的请求与响应模型"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from scheduler_client.schemas.common import PaginatedRequest, PaginatedResponse, Resource, SchedulerRequest
from scheduler_client.schemas.schedules import History, Schedule, ScheduleRequest


class Call(Resource):
    """定时向 HTTP 端点发起请求的 call"""

    application_id: Optional[str] = Field(default=None, alias="app_guid")
    authorization_header: Optional[str] = Field(default=None, alias="auth_header")
    created_at: Optional[str] = None
    name: Optional[str] = None
    space_id: Optional[str] = Field(default=None, alias="space_guid")
    updated_at: Optional[str] = None
    url: Optional[str] = None


class CallSchedule(Schedule):
    call_id: Optional[str] = Field(default=None, alias="call_guid")


class CallHistory(History):
    call_id: Optional[str] = Field(default=None, alias="call_guid")


ListCallsResponse = PaginatedResponse[Call]
ListCallHistoriesResponse = PaginatedResponse[CallHistory]
ListCallSchedulesResponse = PaginatedResponse[CallSchedule]


class CreateCallRequest(SchedulerRequest):
    application_id: str = Field(exclude=True, json_schema_extra={"query": "app_guid"})
    authorization_header: str = Field(alias="auth_header")
    name: str
    url: str


class DeleteCallRequest(SchedulerRequest):
    call_id: str = Field(exclude=True)


class DeleteCallScheduleRequest(SchedulerRequest):
    call_id: str = Field(exclude=True)
    schedule_id: str = Field(exclude=True)


class ExecuteCallRequest(SchedulerRequest):
    call_id: str = Field(exclude=True)


class GetCallRequest(SchedulerRequest):
    call_id: str = Field(exclude=True)


class ListCallsRequest(PaginatedRequest):
    space_id: str = Field(exclude=True, json_schema_extra={"query": "space_guid"})


class ListCallHistoriesRequest(PaginatedRequest):
    call_id: str = Field(exclude=True)


class ListCallScheduleHistoriesRequest(PaginatedRequest):
    call_id: str = Field(exclude=True)
    schedule_id: str = Field(exclude=True)


class ListCallSchedulesRequest(PaginatedRequest):
    call_id: str = Field(exclude=True)


class ScheduleCallRequest(ScheduleRequest):
    call_id: str = Field(exclude=True)
