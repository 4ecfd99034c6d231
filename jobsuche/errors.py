from typing import Optional


class JobsucheError(Exception):
    """Base class for failures surfaced to callers of the Jobsuche operations."""


class ConfigurationError(JobsucheError):
    pass


class ApiError(JobsucheError):
    """Non-success HTTP status or a transport failure talking to the API."""

    def __init__(self, message: str, *, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DecodeError(JobsucheError):
    """The API answered 2xx but the body is not a document we can read."""

    EXCERPT_CHARS = 500

    def __init__(self, message: str, *, url: str, body: str):
        self.url = url
        self.excerpt = body[: self.EXCERPT_CHARS]
        super().__init__(f"{message}; body starts with: {self.excerpt!r}")
