"""Scheduler jobs 资源的请求与响应模型"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from scheduler_client.schemas.common import PaginatedRequest, PaginatedResponse, Resource, SchedulerRequest
from scheduler_client.schemas.schedules import History, Schedule, ScheduleRequest


class JobSchedule(Schedule):
    job_id: Optional[str] = Field(default=None, alias="job_guid")


class JobHistory(History):
    job_id: Optional[str] = Field(default=None, alias="job_guid")


class Job(Resource):
    """针对应用执行命令的 job；detailed 列表会附带 job_schedules"""

    application_id: Optional[str] = Field(default=None, alias="app_guid")
    command: Optional[str] = None
    created_at: Optional[str] = None
    job_schedules: Optional[list[JobSchedule]] = None
    name: Optional[str] = None
    space_id: Optional[str] = Field(default=None, alias="space_guid")
    state: Optional[str] = None
    updated_at: Optional[str] = None


ListJobsResponse = PaginatedResponse[Job]
ListJobHistoriesResponse = PaginatedResponse[JobHistory]
ListJobSchedulesResponse = PaginatedResponse[JobSchedule]


class CreateJobRequest(SchedulerRequest):
    application_id: str = Field(exclude=True, json_schema_extra={"query": "app_guid"})
    command: str
    name: str


class DeleteJobRequest(SchedulerRequest):
    job_id: str = Field(exclude=True)


class DeleteJobScheduleRequest(SchedulerRequest):
    job_id: str = Field(exclude=True)
    schedule_id: str = Field(exclude=True)


class ExecuteJobRequest(SchedulerRequest):
    job_id: str = Field(exclude=True)


class GetJobRequest(SchedulerRequest):
    job_id: str = Field(exclude=True)


class ListJobsRequest(PaginatedRequest):
    space_id: str = Field(exclude=True, json_schema_extra={"query": "space_guid"})
    detailed: Optional[bool] = Field(default=None, exclude=True, json_schema_extra={"query": "detailed"})


class ListJobHistoriesRequest(PaginatedRequest):
    job_id: str = Field(exclude=True)


class ListJobScheduleHistoriesRequest(PaginatedRequest):
    job_id: str = Field(exclude=True)
    schedule_id: str = Field(exclude=True)


class ListJobSchedulesRequest(PaginatedRequest):
    job_id: str = Field(exclude=True)


class ScheduleJobRequest(ScheduleRequest):
    job_id: str = Field(exclude=True)
