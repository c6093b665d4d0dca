from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class SchedulerError:
    """Scheduler 返回的单条校验错误"""

    resource: Optional[str] = None
    messages: List[str] = field(default_factory=list)


class CloudFoundryException(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class SchedulerException(CloudFoundryException):
    """Scheduler 以标准错误体（description + errors）响应的失败"""

    def __init__(
        self,
        status_code: int,
        description: str,
        errors: Optional[List[SchedulerError]] = None,
    ) -> None:
        super().__init__(status_code, description)
        self.description = description
        self.errors = errors


class UnknownSchedulerException(CloudFoundryException):
    """错误体为空或无法解析时抛出，原始内容保存在 payload"""

    def __init__(self, status_code: int, payload: Optional[str] = None) -> None:
        super().__init__(status_code, "Unknown Scheduler Exception")
        self.payload = payload


class PaginationMetadataError(ValueError):
    """严格模式下分页元数据非法（如 total_pages 为负数）"""

    def __init__(self, total_pages: object) -> None:
        super().__init__(f"Invalid total_pages in pagination metadata: {total_pages!r}")
        self.total_pages = total_pages
