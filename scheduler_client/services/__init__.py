from __future__ import annotations

from scheduler_client.services.auth import StaticTokenProvider, TokenProvider
from scheduler_client.services.calls import CallsService
from scheduler_client.services.client import SchedulerClient
from scheduler_client.services.jobs import JobsService

__all__ = [
    "CallsService",
    "JobsService",
    "SchedulerClient",
    "StaticTokenProvider",
    "TokenProvider",
]
