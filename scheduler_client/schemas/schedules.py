from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import Field

from scheduler_client.schemas.common import Resource, SchedulerRequest


class ExpressionType(str, Enum):
    """调度表达式类型"""

    CRON = "cron_expression"
    EXECUTE = "execute"

    @classmethod
    def _missing_(cls, value: Any) -> Optional["ExpressionType"]:
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    def __str__(self) -> str:
        return self.value


class Schedule(Resource):
    created_at: Optional[str] = None
    enabled: Optional[bool] = None
    expression: Optional[str] = None
    expression_type: Optional[ExpressionType] = None
    updated_at: Optional[str] = None


class History(Resource):
    execution_end_time: Optional[str] = None
    execution_start_time: Optional[str] = None
    message: Optional[str] = None
    schedule_id: Optional[str] = Field(default=None, alias="schedule_guid")
    scheduled_time: Optional[str] = None
    state: Optional[str] = None


class ScheduleRequest(SchedulerRequest):
    """创建调度的请求体（enabled / expression / expression_type 均必填）"""

    enabled: bool
    expression: str
    expression_type: ExpressionType
