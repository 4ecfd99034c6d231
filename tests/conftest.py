import json

import httpx
import pytest

from jobsuche.service import JobsucheService
from jobsuche.settings import Settings

API_URL = "http://jobsuche.test"


def listing(refnr, **extra):
    job = {
        "beruf": "Softwareentwickler/in",
        "titel": f"Python Developer {refnr}",
        "refnr": refnr,
        "arbeitgeber": "ACME GmbH",
        "arbeitsort": {"ort": "Berlin", "plz": "10115", "region": "Berlin", "land": "Deutschland"},
        "aktuelleVeroeffentlichungsdatum": "2024-05-01",
    }
    job.update(extra)
    return job


def details(**extra):
    doc = {
        "titel": "Python Developer",
        "stellenbeschreibung": "Build things.",
        "arbeitgeber": "ACME GmbH",
        "arbeitsorte": [{"adresse": {"ort": "Berlin", "plz": "10115"}}],
        "arbeitszeitVollzeit": True,
        "eintrittszeitraum": {"von": "2024-06-01"},
    }
    doc.update(extra)
    return doc


class FakeApi:
    """Routes requests to canned responses and records every call."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.search_responses: list = []
        self.detail_responses: dict = {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path == "/pc/v4/jobs":
            # the last queued search response repeats
            resp = self.search_responses.pop(0) if len(self.search_responses) > 1 else self.search_responses[0]
        elif path.startswith("/pc/v4/jobdetails/"):
            refnr = path.rsplit("/", 1)[1]
            resp = self.detail_responses.get(refnr, httpx.Response(404))
        else:
            resp = httpx.Response(404)
        if isinstance(resp, Exception):
            raise resp
        if isinstance(resp, (dict, list)):
            return httpx.Response(200, text=json.dumps(resp))
        return resp

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_api():
    return FakeApi()


@pytest.fixture
def settings():
    return Settings(
        API_URL=API_URL,
        API_KEY="test-key",
        DEFAULT_PAGE_SIZE=25,
        MAX_PAGE_SIZE=100,
        BATCH_SEARCH_DELAY=0,
        BATCH_DETAIL_DELAY=0,
    )


@pytest.fixture
async def service(settings, fake_api):
    svc = JobsucheService.create(settings, transport=fake_api.transport)
    yield svc
    await svc.aclose()
