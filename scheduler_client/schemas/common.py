from __future__ import annotations

from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class SchedulerModel(BaseModel):
    """响应模型基类：不可变、忽略未知字段、允许按字段名或 JSON 名赋值"""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Resource(SchedulerModel):
    id: Optional[str] = Field(default=None, alias="guid")


class Link(SchedulerModel):
    href: Optional[str] = None


class Pagination(SchedulerModel):
    # 计数保留服务端原始值，合法性由 core.pagination.resolve_total_pages 统一判定
    total_pages: Any = None
    total_results: Any = None
    first: Optional[Link] = None
    last: Optional[Link] = None
    next: Optional[Link] = None
    previous: Optional[Link] = None


class PaginatedResponse(SchedulerModel, Generic[T]):
    resources: list[T] = Field(default_factory=list)
    pagination: Optional[Pagination] = None


class SchedulerRequest(BaseModel):
    """请求模型基类

    字段分三类：
    - 路径参数：Field(exclude=True)，由服务层拼接 URL
    - 查询参数：Field(exclude=True, json_schema_extra={"query": "<name>"})
    - 请求体：其余字段，按 alias 序列化
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def query_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            extra = field.json_schema_extra
            if not isinstance(extra, dict) or "query" not in extra:
                continue
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool):
                value = str(value).lower()
            params[str(extra["query"])] = value
        return params

    def body(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PaginatedRequest(SchedulerRequest):
    page: Optional[int] = Field(default=None, ge=1, exclude=True, json_schema_extra={"query": "page"})
