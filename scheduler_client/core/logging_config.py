from __future__ import annotations

import logging
from typing import Optional

from scheduler_client.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    level_name = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
    # httpx 在 INFO 级别逐条记录请求，降一级避免刷屏
    logging.getLogger("httpx").setLevel(logging.WARNING)
