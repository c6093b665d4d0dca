"""List every scheduler call and job in a Cloud Foundry space.

Usage: python scripts/list_space_resources.py <space_guid>
Reads SCHEDULER_API_URL / SCHEDULER_ACCESS_TOKEN from the environment or .env.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import logging  # noqa: E402

from scheduler_client.core.logging_config import configure_logging  # noqa: E402
from scheduler_client.schemas.calls import ListCallsRequest  # noqa: E402
from scheduler_client.schemas.jobs import ListJobsRequest  # noqa: E402
from scheduler_client.services.client import SchedulerClient  # noqa: E402

configure_logging()
logger = logging.getLogger(__name__)


async def main(space_id: str) -> None:
    client = SchedulerClient.from_settings()
    logger.info(f"Listing scheduler resources in space {space_id}...")

    print("\n" + "=" * 60)
    print("CALLS")
    print("=" * 60)
    call_count = 0
    async for call in client.calls.list_all(ListCallsRequest(space_id=space_id)):
        call_count += 1
        print(f"  {call.id or '-':<38} {call.name or '-':<24} {call.url or '-'}")

    print("\n" + "=" * 60)
    print("JOBS")
    print("=" * 60)
    job_count = 0
    async for job in client.jobs.list_all(ListJobsRequest(space_id=space_id, detailed=True)):
        job_count += 1
        schedules = ", ".join(s.expression or "-" for s in job.job_schedules or []) or "-"
        print(f"  {job.id or '-':<38} {job.name or '-':<24} {job.command or '-':<16} {schedules}")

    print("-" * 60)
    print(f"  Total calls: {call_count}")
    print(f"  Total jobs:  {job_count}")
    print("=" * 60)

    logger.info("Done.")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)
    asyncio.run(main(sys.argv[1]))
