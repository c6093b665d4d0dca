from __future__ import annotations

from typing import Any, AsyncIterator

from scheduler_client.core.pagination import request_resources
from scheduler_client.schemas.jobs import (
    CreateJobRequest,
    DeleteJobRequest,
    DeleteJobScheduleRequest,
    ExecuteJobRequest,
    GetJobRequest,
    Job,
    JobHistory,
    JobSchedule,
    ListJobHistoriesRequest,
    ListJobHistoriesResponse,
    ListJobScheduleHistoriesRequest,
    ListJobSchedulesRequest,
    ListJobSchedulesResponse,
    ListJobsRequest,
    ListJobsResponse,
    ScheduleJobRequest,
)
from scheduler_client.services.base import SchedulerOperations


class JobsService(SchedulerOperations):
    """Scheduler v1 jobs API"""

    async def create(self, request: CreateJobRequest) -> Job:
        return await self._post(request, Job, "jobs")

    async def delete(self, request: DeleteJobRequest) -> None:
        await self._delete(request, "jobs", request.job_id)

    async def delete_schedule(self, request: DeleteJobScheduleRequest) -> None:
        await self._delete(request, "jobs", request.job_id, "schedules", request.schedule_id)

    async def execute(self, request: ExecuteJobRequest) -> JobHistory:
        return await self._post(request, JobHistory, "jobs", request.job_id, "execute")

    async def get(self, request: GetJobRequest) -> Job:
        return await self._get(request, Job, "jobs", request.job_id)

    async def list(self, request: ListJobsRequest) -> ListJobsResponse:
        return await self._get(request, ListJobsResponse, "jobs")

    async def list_histories(self, request: ListJobHistoriesRequest) -> ListJobHistoriesResponse:
        return await self._get(request, ListJobHistoriesResponse, "jobs", request.job_id, "history")

    async def list_schedule_histories(
        self, request: ListJobScheduleHistoriesRequest
    ) -> ListJobHistoriesResponse:
        return await self._get(
            request,
            ListJobHistoriesResponse,
            "jobs",
            request.job_id,
            "schedules",
            request.schedule_id,
            "history",
        )

    async def list_schedules(self, request: ListJobSchedulesRequest) -> ListJobSchedulesResponse:
        return await self._get(request, ListJobSchedulesResponse, "jobs", request.job_id, "schedules")

    async def schedule(self, request: ScheduleJobRequest) -> JobSchedule:
        return await self._post(request, JobSchedule, "jobs", request.job_id, "schedules")

    def list_all(self, request: ListJobsRequest, **kwargs: Any) -> AsyncIterator[Job]:
        return request_resources(
            lambda page: self.list(request.model_copy(update={"page": page})), **kwargs
        )

    def list_all_histories(self, request: ListJobHistoriesRequest, **kwargs: Any) -> AsyncIterator[JobHistory]:
        return request_resources(
            lambda page: self.list_histories(request.model_copy(update={"page": page})), **kwargs
        )

    def list_all_schedule_histories(
        self, request: ListJobScheduleHistoriesRequest, **kwargs: Any
    ) -> AsyncIterator[JobHistory]:
        return request_resources(
            lambda page: self.list_schedule_histories(request.model_copy(update={"page": page})), **kwargs
        )

    def list_all_schedules(self, request: ListJobSchedulesRequest, **kwargs: Any) -> AsyncIterator[JobSchedule]:
        return request_resources(
            lambda page: self.list_schedules(request.model_copy(update={"page": page})), **kwargs
        )
