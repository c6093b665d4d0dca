"""容错机制

对幂等请求（GET）提供指数退避重试，处理网络抖动、超时等瞬时故障。
业务错误（4xx/5xx 映射出的 SchedulerException）不在重试范围内。
"""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, TypeVar

logger = logging.getLogger("scheduler_client.fault_tolerance")

T = TypeVar("T")


@dataclass
class RetryConfig:
    """重试配置

    Attributes:
        max_attempts: 最大尝试次数（包括首次调用）
        initial_delay: 初始延迟（秒）
        max_delay: 最大延迟（秒）
        exponential_base: 指数退避基数
        jitter: 是否添加随机抖动（防止重试风暴）
    """

    max_attempts: int = 3
    initial_delay: float = 0.5
    max_delay: float = 10.0
    exponential_base: float = 2.0
    jitter: bool = True

    def delay_for(self, attempt: int) -> float:
        delay = min(
            self.initial_delay * (self.exponential_base ** (attempt - 1)),
            self.max_delay,
        )
        if self.jitter:
            # 0-50% 抖动
            delay = delay * (0.5 + random.random() * 0.5)
        return delay


async def call_with_retry(
    func: Callable[..., Awaitable[T]],
    *args: Any,
    config: Optional[RetryConfig] = None,
    exceptions: tuple = (Exception,),
    **kwargs: Any,
) -> T:
    """调用异步函数，遇到指定异常时按指数退避重试，耗尽后原样抛出最后一次异常"""
    config = config or RetryConfig()
    name = getattr(func, "__name__", repr(func))

    for attempt in range(1, config.max_attempts + 1):
        try:
            return await func(*args, **kwargs)
        except exceptions as exc:
            if attempt >= config.max_attempts:
                logger.error(f"Retry exhausted for {name} after {attempt} attempts: {exc}")
                raise

            delay = config.delay_for(attempt)
            logger.warning(
                f"Retry {attempt}/{config.max_attempts} for {name} after {delay:.2f}s: {exc}"
            )
            await asyncio.sleep(delay)

    raise RuntimeError("max_attempts must be at least 1")
