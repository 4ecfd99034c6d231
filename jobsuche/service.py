from __future__ import annotations

import logging
import time
from typing import Optional

import httpx

from jobsuche import SERVER_NAME, __version__
from jobsuche.client.jobsuche import JobsucheClient
from jobsuche.models.job import (
    BatchSearchItem,
    BatchSearchParams,
    BatchSearchResult,
    JobDetail,
    SearchJobsParams,
    SearchJobsResult,
    ServerStatus,
)
from jobsuche.pipeline.normalize import to_detail, to_summary
from jobsuche.pipeline.orchestrator import run_batch
from jobsuche.pipeline.query import SearchQuery, build_from_params, build_search_query
from jobsuche.settings import Settings, load_settings

logger = logging.getLogger(__name__)

TOOLS = ("search_jobs", "get_job_details", "batch_search_jobs", "get_server_status")


class JobsucheService:
    """The four caller-facing operations, wired to one shared API client."""

    def __init__(self, settings: Settings, client: JobsucheClient):
        self.settings = settings
        self.client = client
        self._started = time.monotonic()

    @classmethod
    def create(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "JobsucheService":
        """Load configuration and build the client. Raises ConfigurationError on bad settings."""
        settings = settings or load_settings()
        client = JobsucheClient(
            settings.API_URL,
            settings.API_KEY,
            timeout=settings.REQUEST_TIMEOUT,
            user_agent=settings.USER_AGENT,
            transport=transport,
        )
        logger.info("Jobsuche service ready, API URL = %s", settings.API_URL)
        return cls(settings, client)

    async def aclose(self) -> None:
        await self.client.aclose()

    @property
    def uptime_seconds(self) -> int:
        return int(time.monotonic() - self._started)

    async def _search(self, query: SearchQuery) -> SearchJobsResult:
        start = time.monotonic()
        response = await self.client.search(query)
        jobs = [to_summary(j) for j in response.stellenangebote]
        duration_ms = int((time.monotonic() - start) * 1000)
        logger.info("Search completed: %d jobs in %d ms", len(jobs), duration_ms)
        return SearchJobsResult(
            total_results=response.max_ergebnisse,
            current_page=response.page,
            page_size=response.size,
            jobs_count=len(jobs),
            jobs=jobs,
            search_duration_ms=duration_ms,
        )

    async def search_jobs(self, params: SearchJobsParams) -> SearchJobsResult:
        logger.info("Searching jobs: %s", params.model_dump(exclude_none=True))
        query = build_from_params(
            params,
            default_page_size=self.settings.DEFAULT_PAGE_SIZE,
            max_page_size=self.settings.MAX_PAGE_SIZE,
        )
        return await self._search(query)

    async def get_job_details(self, reference_number: str) -> JobDetail:
        logger.info("Getting job details for %s", reference_number)
        details = await self.client.fetch_detail(reference_number)
        return to_detail(reference_number, details)

    async def _batch_item_search(self, item: BatchSearchItem, page_size: int) -> SearchJobsResult:
        size = min(page_size, self.settings.MAX_PAGE_SIZE)
        return await self._search(build_search_query(item, page_size=size))

    async def batch_search_jobs(self, params: BatchSearchParams) -> BatchSearchResult:
        logger.info("Batch search: %d searches", len(params.searches))
        return await run_batch(
            params.searches,
            params.max_details_per_search,
            search=self._batch_item_search,
            fetch_detail=self.get_job_details,
            search_delay=self.settings.BATCH_SEARCH_DELAY,
            detail_delay=self.settings.BATCH_DETAIL_DELAY,
        )

    async def check_connection(self) -> str:
        probe = SearchQuery(wo="Berlin", size=1)
        try:
            await self.client.search(probe)
        except Exception as e:
            logger.warning("Connectivity probe failed: %s", e)
            return f"Connection Error: {e}"
        return "Connected"

    async def get_server_status(self) -> ServerStatus:
        return ServerStatus(
            server_name=SERVER_NAME,
            version=__version__,
            uptime_seconds=self.uptime_seconds,
            api_url=self.settings.API_URL,
            api_connection_status=await self.check_connection(),
            tools_count=len(TOOLS),
        )
