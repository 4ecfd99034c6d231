from __future__ import annotations

import json
import logging
from typing import Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from jobsuche.client.http import get_client
from jobsuche.errors import ApiError, DecodeError
from jobsuche.models.api import ApiJobDetails, ApiSearchResponse
from jobsuche.pipeline.query import SearchQuery

logger = logging.getLogger(__name__)

SEARCH_PATH = "/pc/v4/jobs"
DETAIL_PATH = "/pc/v4/jobdetails/{refnr}"

_M = TypeVar("_M", bound=BaseModel)


class JobsucheClient:
    """
    Async client for the Bundesagentur für Arbeit jobsuche API.

    One httpx.AsyncClient is held for the lifetime of the process and shared
    by concurrent callers; it is never mutated after construction. Failures
    surface immediately: there is no retry or backoff here.
    """

    def __init__(
        self,
        api_url: str,
        api_key: Optional[str] = None,
        *,
        timeout: float = 20.0,
        user_agent: str = "jobsuche-server",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self._http = get_client(api_key, user_agent=user_agent, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "JobsucheClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def search(self, query: SearchQuery) -> ApiSearchResponse:
        url = f"{self.api_url}{SEARCH_PATH}"
        return await self._get(url, ApiSearchResponse, params=query.to_params())

    async def fetch_detail(self, reference: str) -> ApiJobDetails:
        url = f"{self.api_url}{DETAIL_PATH.format(refnr=quote(reference, safe=''))}"
        return await self._get(url, ApiJobDetails)

    async def _get(self, url: str, model: Type[_M], params: Optional[list] = None) -> _M:
        try:
            r = await self._http.get(url, params=params)
        except httpx.HTTPError as e:
            logger.debug("GET %s failed: %r", url, e)
            raise ApiError(f"API request failed: {e.__class__.__name__}: {e}", url=url) from e

        if not r.is_success:
            raise ApiError(f"API error: {r.status_code} {r.reason_phrase}".rstrip(), url=url, status_code=r.status_code)

        body = r.text
        try:
            data = json.loads(body)
        except ValueError as e:
            raise DecodeError(f"API returned invalid JSON ({e})", url=url, body=body) from e
        if not isinstance(data, dict):
            raise DecodeError(f"API returned {type(data).__name__}, expected an object", url=url, body=body)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise DecodeError(
                f"unexpected {model.__name__} document: {e.error_count()} field error(s)", url=url, body=body
            ) from e
