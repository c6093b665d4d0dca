"""HTTP 错误响应到 Scheduler 异常的映射"""

from __future__ import annotations

import json
import logging

import httpx

from scheduler_client.core.exceptions import (
    SchedulerError,
    SchedulerException,
    UnknownSchedulerException,
)

logger = logging.getLogger("scheduler_client.error_mapper")


def is_error(response: httpx.Response) -> bool:
    return response.is_client_error or response.is_server_error


def _parse_scheduler_exception(status_code: int, payload: str) -> SchedulerException:
    body = json.loads(payload)
    description = body["description"]
    if not isinstance(description, str):
        raise TypeError("description must be a string")
    errors = [
        SchedulerError(resource=error.get("resource"), messages=list(error.get("messages") or []))
        for error in body["errors"]
    ]
    return SchedulerException(status_code, description, errors)


def raise_for_scheduler_error(response: httpx.Response) -> None:
    """响应为 4xx/5xx 时抛出对应异常，否则直接返回

    Raises:
        SchedulerException: 错误体为 {"description": ..., "errors": [...]}
        UnknownSchedulerException: 错误体为空或格式不符
    """
    if not is_error(response):
        return

    status_code = response.status_code
    payload = response.text
    if not payload:
        raise UnknownSchedulerException(status_code)

    try:
        exc = _parse_scheduler_exception(status_code, payload)
    except (ValueError, KeyError, TypeError, AttributeError) as parse_exc:
        logger.debug(f"Unparseable scheduler error payload (HTTP {status_code}): {parse_exc}")
        raise UnknownSchedulerException(status_code, payload) from parse_exc

    logger.debug(f"Scheduler error (HTTP {status_code}): {exc.description}")
    raise exc
