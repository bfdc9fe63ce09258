#!/usr/bin/env python3
"""Repair drifted like/dislike and reply counters.

Usage:
    python scripts/reconcile_counters.py <content_id> [<content_id> ...]

Each content item is reconciled in its own transaction. Safe to re-run.
"""

import asyncio
import sys

import logfire

from remark.application.usecase.comment import ReconcileCountersUseCase
from remark.config import Settings
from remark.util.di.container import create_container
from remark.util.observability import configure_logfire


async def reconcile(content_ids: list[str]) -> None:
    container = create_container()
    try:
        for content_id in content_ids:
            async with container() as request_container:
                use_case = await request_container.get(ReconcileCountersUseCase)
                result = await use_case.execute(content_id)
            logfire.info(
                "Reconciled content",
                content_id=content_id,
                checked=result.comments_checked,
                votes=result.vote_counters_repaired,
                replies=result.reply_counters_repaired,
            )
    finally:
        await container.close()


def main() -> int:
    if len(sys.argv) < 2:
        print(__doc__)
        return 2

    configure_logfire(Settings())
    asyncio.run(reconcile(sys.argv[1:]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
