# jobsuche/pipeline/orchestrator.py
from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional, Sequence

from jobsuche.models.job import (
    BatchSearchItem,
    BatchSearchOutcome,
    BatchSearchResult,
    JobDetail,
    SearchJobsResult,
)

logger = logging.getLogger(__name__)

MAX_SEARCHES = 5
MAX_DETAILS_PER_SEARCH = 5
DEFAULT_DETAILS_PER_SEARCH = 2

SearchFn = Callable[[BatchSearchItem, int], Awaitable[SearchJobsResult]]
DetailFn = Callable[[str], Awaitable[JobDetail]]
SleepFn = Callable[[float], Awaitable[None]]

# --- helpers -----------------------------------------------------------------

def clamp_detail_count(requested: Optional[int]) -> int:
    if requested is None:
        return DEFAULT_DETAILS_PER_SEARCH
    return max(0, min(requested, MAX_DETAILS_PER_SEARCH))

def _error_text(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__

# --- per-search step ----------------------------------------------------------

async def _run_one(
    item: BatchSearchItem,
    detail_count: int,
    *,
    search: SearchFn,
    fetch_detail: DetailFn,
    detail_delay: float,
    sleep: SleepFn,
) -> BatchSearchOutcome:
    try:
        # size 0 is not a valid page; still ask for one hit so total_results is reported
        found = await search(item, max(detail_count, 1))
    except Exception as e:
        logger.warning("[batch] search %r failed: %s", item.name, e)
        return BatchSearchOutcome(search_name=item.name, error=_error_text(e))

    details: list[JobDetail] = []
    for i, summary in enumerate(found.jobs[:detail_count]):
        if i > 0:
            await sleep(detail_delay)
        try:
            details.append(await fetch_detail(summary.reference_number))
        except Exception as e:
            logger.warning("[batch] %r: skipping job %s: %s", item.name, summary.reference_number, e)
            continue

    return BatchSearchOutcome(
        search_name=item.name,
        total_results=found.total_results,
        jobs_count=len(details),
        jobs=details,
    )

# --- main run ----------------------------------------------------------------

async def run_batch(
    searches: Sequence[BatchSearchItem],
    max_details: Optional[int],
    *,
    search: SearchFn,
    fetch_detail: DetailFn,
    search_delay: float = 0.2,
    detail_delay: float = 0.1,
    sleep: SleepFn = asyncio.sleep,
) -> BatchSearchResult:
    """
    Run up to MAX_SEARCHES searches one after another, each followed by up to
    `max_details` detail look-ups.

    Exactly one upstream request is in flight at any time; `search_delay`
    separates searches and `detail_delay` separates detail fetches within one
    search. A failed search yields an outcome carrying its error; a failed
    detail fetch drops that job only. Cancellation propagates
    and is never recorded as an outcome.
    """
    start = time.monotonic()
    items = list(searches)[:MAX_SEARCHES]
    detail_count = clamp_detail_count(max_details)
    if len(searches) > MAX_SEARCHES:
        logger.info("[batch] %d searches requested, processing the first %d", len(searches), MAX_SEARCHES)

    outcomes: list[BatchSearchOutcome] = []
    for i, item in enumerate(items):
        if i > 0:
            await sleep(search_delay)
        logger.info("[batch] %d/%d %r", i + 1, len(items), item.name)
        outcomes.append(
            await _run_one(
                item,
                detail_count,
                search=search,
                fetch_detail=fetch_detail,
                detail_delay=detail_delay,
                sleep=sleep,
            )
        )

    failed = sum(1 for o in outcomes if o.error is not None)
    total_jobs = sum(o.jobs_count for o in outcomes)
    duration_ms = int((time.monotonic() - start) * 1000)
    logger.info(
        "[batch] done: %d searches (%d failed), %d jobs in %d ms", len(outcomes), failed, total_jobs, duration_ms
    )
    return BatchSearchResult(
        results=outcomes,
        total_searches=len(outcomes),
        successful_searches=len(outcomes) - failed,
        failed_searches=failed,
        total_jobs=total_jobs,
        total_duration_ms=duration_ms,
    )
