from __future__ import annotations

from functools import cached_property
from typing import Optional

from scheduler_client.config import settings
from scheduler_client.services.auth import StaticTokenProvider, TokenProvider
from scheduler_client.services.calls import CallsService
from scheduler_client.services.jobs import JobsService


class SchedulerClient:
    """Scheduler API 入口

    Example:
        client = SchedulerClient.from_settings()
        async for call in client.calls.list_all(ListCallsRequest(space_id=space_id)):
            ...
    """

    def __init__(
        self,
        root: str,
        token_provider: TokenProvider,
        config: Optional[object] = None,
    ) -> None:
        self.root = root
        self.token_provider = token_provider
        self._config = config

    @classmethod
    def from_settings(cls, config: Optional[object] = None) -> "SchedulerClient":
        if not settings.SCHEDULER_API_URL or not settings.SCHEDULER_ACCESS_TOKEN:
            raise RuntimeError("Scheduler settings are not set")
        return cls(
            settings.SCHEDULER_API_URL,
            StaticTokenProvider(settings.SCHEDULER_ACCESS_TOKEN),
            config,
        )

    @cached_property
    def calls(self) -> CallsService:
        return CallsService(self.root, self.token_provider, self._config)

    @cached_property
    def jobs(self) -> JobsService:
        return JobsService(self.root, self.token_provider, self._config)
