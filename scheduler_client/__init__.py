from __future__ import annotations

from scheduler_client.core.exceptions import (
    CloudFoundryException,
    PaginationMetadataError,
    SchedulerError,
    SchedulerException,
    UnknownSchedulerException,
)
from scheduler_client.core.pagination import collect_resources, request_resources
from scheduler_client.services import SchedulerClient, StaticTokenProvider, TokenProvider

__all__ = [
    "CloudFoundryException",
    "PaginationMetadataError",
    "SchedulerClient",
    "SchedulerError",
    "SchedulerException",
    "StaticTokenProvider",
    "TokenProvider",
    "UnknownSchedulerException",
    "collect_resources",
    "request_resources",
]
