from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from scheduler_client.config import settings
from scheduler_client.core.error_mapper import raise_for_scheduler_error
from scheduler_client.core.fault_tolerance import RetryConfig, call_with_retry
from scheduler_client.schemas.common import SchedulerRequest
from scheduler_client.services.auth import TokenProvider

logger = logging.getLogger("scheduler_client.http")

ResponseT = TypeVar("ResponseT", bound=BaseModel)

RETRYABLE_EXCEPTIONS = (httpx.TimeoutException, httpx.NetworkError)

OVERRIDABLE_OPTIONS = ("timeout", "max_attempts", "retry_delay")


class SchedulerOperations:
    """Scheduler v1 资源操作基类：拼接路径、附加令牌、映射错误、解析响应

    GET 为幂等请求，网络错误与超时按 RetryConfig 重试；POST / DELETE 不重试。
    """

    def __init__(
        self,
        root: str,
        token_provider: TokenProvider,
        config: Optional[object] = None,
    ) -> None:
        if not root:
            raise RuntimeError("Scheduler root URL is not set")

        self._root = root.rstrip("/")
        self._token_provider = token_provider
        overrides = self._overrides(config)
        self._timeout = overrides.get("timeout", settings.SCHEDULER_REQUEST_TIMEOUT)
        self._retry_config = RetryConfig(
            max_attempts=overrides.get("max_attempts", settings.SCHEDULER_HTTP_MAX_ATTEMPTS),
            initial_delay=overrides.get("retry_delay", settings.SCHEDULER_HTTP_RETRY_DELAY),
        )

    @staticmethod
    def _overrides(config: Optional[object]) -> Dict[str, Any]:
        # config 可以是映射或带同名属性的对象，值为 None 的项沿用 settings
        if config is None:
            return {}
        if isinstance(config, Mapping):
            values = {key: config.get(key) for key in OVERRIDABLE_OPTIONS}
        else:
            values = {key: getattr(config, key, None) for key in OVERRIDABLE_OPTIONS}
        return {key: value for key, value in values.items() if value is not None}

    @staticmethod
    def _path(*segments: str) -> str:
        return "/" + "/".join(quote(segment, safe="") for segment in segments)

    async def _request(
        self,
        method: str,
        path: str,
        request: SchedulerRequest,
        response_type: Optional[Type[ResponseT]],
    ) -> Optional[ResponseT]:
        headers = {
            "Authorization": await self._token_provider.get_token(),
            "Accept": "application/json",
        }
        params = request.query_params() or None
        body = request.body() if method == "POST" else None

        logger.debug(f"{method} {path} params={params}")
        async with httpx.AsyncClient(base_url=self._root, timeout=self._timeout) as client:
            response = await client.request(method, path, params=params, json=body, headers=headers)

        raise_for_scheduler_error(response)
        if response_type is None:
            return None
        return response_type.model_validate(response.json())

    async def _get(self, request: SchedulerRequest, response_type: Type[ResponseT], *segments: str) -> ResponseT:
        return await call_with_retry(
            self._request,
            "GET",
            self._path(*segments),
            request,
            response_type,
            config=self._retry_config,
            exceptions=RETRYABLE_EXCEPTIONS,
        )

    async def _post(self, request: SchedulerRequest, response_type: Type[ResponseT], *segments: str) -> ResponseT:
        return await self._request("POST", self._path(*segments), request, response_type)

    async def _delete(self, request: SchedulerRequest, *segments: str) -> None:
        await self._request("DELETE", self._path(*segments), request, None)
