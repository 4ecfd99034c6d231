"""HTTP façade exposing the Jobsuche operations as JSON tools."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from jobsuche import SERVER_NAME, __version__
from jobsuche.errors import JobsucheError
from jobsuche.models.job import (
    BatchSearchParams,
    BatchSearchResult,
    GetJobDetailsParams,
    JobDetail,
    SearchJobsParams,
    SearchJobsResult,
    ServerStatus,
)
from jobsuche.service import JobsucheService
from jobsuche.settings import load_settings

logger = logging.getLogger(__name__)

TOOL_DESCRIPTIONS = {
    "search_jobs": (
        "Search for jobs in Germany using the Federal Employment Agency database",
        SearchJobsParams,
    ),
    "get_job_details": ("Get detailed information about a specific job posting", GetJobDetailsParams),
    "batch_search_jobs": (
        "Run up to 5 searches and fetch details for the top results of each",
        BatchSearchParams,
    ),
    "get_server_status": ("Get server status and API connectivity", None),
}


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def create_app(service: Optional[JobsucheService] = None) -> FastAPI:
    """Build the app. Without an explicit service one is created from the environment at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        svc = service or JobsucheService.create()
        app.state.service = svc
        try:
            yield
        finally:
            await svc.aclose()

    app = FastAPI(title=SERVER_NAME, version=__version__, lifespan=lifespan)

    @app.exception_handler(JobsucheError)
    async def _jobsuche_error(request: Request, exc: JobsucheError):
        logger.error("%s failed: %s", request.url.path, exc)
        return JSONResponse({"error": str(exc)}, status_code=502)

    def _service(request: Request) -> JobsucheService:
        return request.app.state.service

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/tools")
    async def list_tools():
        return [
            {
                "name": name,
                "description": description,
                "input_schema": model.model_json_schema() if model else {"type": "object", "properties": {}},
            }
            for name, (description, model) in TOOL_DESCRIPTIONS.items()
        ]

    @app.post("/tools/search_jobs", response_model=SearchJobsResult)
    async def search_jobs(params: SearchJobsParams, request: Request):
        return await _service(request).search_jobs(params)

    @app.post("/tools/get_job_details", response_model=JobDetail)
    async def get_job_details(params: GetJobDetailsParams, request: Request):
        return await _service(request).get_job_details(params.reference_number)

    @app.post("/tools/batch_search_jobs", response_model=BatchSearchResult)
    async def batch_search_jobs(params: BatchSearchParams, request: Request):
        return await _service(request).batch_search_jobs(params)

    @app.get("/tools/get_server_status", response_model=ServerStatus)
    async def get_server_status(request: Request):
        return await _service(request).get_server_status()

    return app


def main() -> None:
    import uvicorn

    settings = load_settings()
    configure_logging(settings.LOG_LEVEL)
    service = JobsucheService.create(settings)
    uvicorn.run(create_app(service), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
