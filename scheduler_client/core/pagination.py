"""分页聚合

把按页返回的资源列表接口（一次一页）转换为单一、有序、惰性的资源流。

核心流程：
- 首页：必须先获取第 1 页，从分页元数据中读取 total_pages（缺省视为 1 页）
- 其余页：以有限并发请求第 2..total_pages 页
- 重排序：无论各页完成顺序如何，按页码升序、页内顺序输出资源

失败语义：
- 任意一页失败即终止整个聚合，异常原样抛给调用方，不做重试
- 失败页之后的资源不会被输出；消费方提前结束时，取消所有在途请求
"""

from __future__ import annotations

import asyncio
import logging
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    Dict,
    List,
    Optional,
    Protocol,
    Sequence,
    TypeVar,
)

from scheduler_client.config import settings
from scheduler_client.core.exceptions import PaginationMetadataError

logger = logging.getLogger("scheduler_client.pagination")

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Page(Protocol[T_co]):
    """单页响应：至少提供有序的 resources"""

    @property
    def resources(self) -> Sequence[T_co]: ...


PageFetcher = Callable[[int], Awaitable[Page[T]]]
TotalPagesExtractor = Callable[[Any], Any]


def _default_total_pages(page: Any) -> Any:
    pagination = getattr(page, "pagination", None)
    if pagination is None:
        return None
    return getattr(pagination, "total_pages", None)


def resolve_total_pages(raw: Any, *, strict: bool = False) -> int:
    """将服务端返回的 total_pages 规整为 >= 1 的页数

    Args:
        raw: 分页元数据中的原始值
        strict: 为 True 时非法值抛出 PaginationMetadataError，否则按 1 页处理

    Returns:
        需要读取的总页数
    """
    if raw is None:
        return 1
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        if strict:
            raise PaginationMetadataError(raw)
        logger.warning(f"Malformed total_pages {raw!r} in pagination metadata, reading first page only")
        return 1
    return max(raw, 1)


async def _fetch_page(page_fetcher: PageFetcher[T], page_number: int) -> Page[T]:
    try:
        return await page_fetcher(page_number)
    except Exception as exc:
        logger.warning(f"Failed to fetch page {page_number}: {exc}")
        raise


def _raise_first_failure(pending: Dict[int, asyncio.Future]) -> None:
    # pending 按页码升序插入，优先上抛页码最小的失败
    for task in pending.values():
        if task.done() and not task.cancelled() and task.exception() is not None:
            raise task.exception()


async def _wait_for_page(pending: Dict[int, asyncio.Future], page_number: int) -> Page[Any]:
    # 等待目标页的同时观察其他在途页，任何一页失败（包括消费期间已失败的页）立即上抛
    target = pending[page_number]
    _raise_first_failure(pending)
    while not target.done():
        in_flight = [task for task in pending.values() if not task.done()]
        await asyncio.wait(in_flight, return_when=asyncio.FIRST_COMPLETED)
        _raise_first_failure(pending)
    del pending[page_number]
    return target.result()


async def request_resources(
    page_fetcher: PageFetcher[T],
    *,
    concurrency: Optional[int] = None,
    total_pages_of: Optional[TotalPagesExtractor] = None,
    strict: Optional[bool] = None,
) -> AsyncIterator[T]:
    """聚合分页接口的全部资源

    Args:
        page_fetcher: 页码（从 1 开始）到单页响应的异步函数，每次聚合应传入新的闭包
        concurrency: 同时在途的页请求上限，默认取 SCHEDULER_PAGE_CONCURRENCY
        total_pages_of: 从单页响应中提取总页数，默认读取 page.pagination.total_pages
        strict: 分页元数据非法时是否报错，默认取 SCHEDULER_STRICT_PAGINATION

    Yields:
        按页码升序、页内顺序排列的资源

    Example:
        async for call in request_resources(
            lambda page: client.calls.list(ListCallsRequest(space_id=space_id, page=page))
        ):
            ...
    """
    limit = settings.SCHEDULER_PAGE_CONCURRENCY if concurrency is None else concurrency
    if limit < 1:
        raise ValueError("concurrency must be at least 1")
    if strict is None:
        strict = settings.SCHEDULER_STRICT_PAGINATION
    extract_total_pages = total_pages_of or _default_total_pages

    first = await _fetch_page(page_fetcher, 1)
    total_pages = resolve_total_pages(extract_total_pages(first), strict=strict)
    logger.debug(f"First page resolved: total_pages={total_pages}, resources={len(first.resources)}")

    if total_pages <= 1:
        for resource in first.resources:
            yield resource
        return

    pending: Dict[int, asyncio.Future] = {}
    next_page = 2

    def dispatch() -> None:
        nonlocal next_page
        while next_page <= total_pages and len(pending) < limit:
            pending[next_page] = asyncio.ensure_future(_fetch_page(page_fetcher, next_page))
            next_page += 1

    try:
        dispatch()
        for resource in first.resources:
            yield resource

        for page_number in range(2, total_pages + 1):
            page = await _wait_for_page(pending, page_number)
            dispatch()
            for resource in page.resources:
                yield resource
    finally:
        if pending:
            for task in pending.values():
                task.cancel()
            await asyncio.gather(*pending.values(), return_exceptions=True)
            logger.debug(f"Abandoned {len(pending)} in-flight page request(s)")


async def collect_resources(page_fetcher: PageFetcher[T], **kwargs: Any) -> List[T]:
    """读取全部页并返回资源列表，参数同 request_resources"""
    return [resource async for resource in request_resources(page_fetcher, **kwargs)]
