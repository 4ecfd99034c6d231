from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jobsuche.errors import ConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="JOBSUCHE_", env_file=".env", extra="ignore")

    API_URL: str = "https://rest.arbeitsagentur.de/jobboerse/jobsuche-service"
    # None falls back to the public demo key in the client
    API_KEY: Optional[str] = None
    DEFAULT_PAGE_SIZE: int = 25
    MAX_PAGE_SIZE: int = 100
    REQUEST_TIMEOUT: float = 20.0
    USER_AGENT: str = "jobsuche-server/0.3.1"

    # Pacing between upstream calls inside a batch (seconds)
    BATCH_SEARCH_DELAY: float = 0.2
    BATCH_DETAIL_DELAY: float = 0.1

    HOST: str = "127.0.0.1"
    PORT: int = 3541
    LOG_LEVEL: str = "INFO"

    @model_validator(mode="after")
    def _check(self) -> "Settings":
        self.API_URL = self.API_URL.strip().rstrip("/")
        if not self.API_URL.startswith(("http://", "https://")):
            raise ValueError(f"API_URL must be an http(s) URL, got {self.API_URL!r}")
        if self.DEFAULT_PAGE_SIZE < 1 or self.MAX_PAGE_SIZE < 1:
            raise ValueError("page sizes must be >= 1")
        if self.DEFAULT_PAGE_SIZE > self.MAX_PAGE_SIZE:
            raise ValueError(
                f"DEFAULT_PAGE_SIZE ({self.DEFAULT_PAGE_SIZE}) exceeds MAX_PAGE_SIZE ({self.MAX_PAGE_SIZE})"
            )
        if self.BATCH_SEARCH_DELAY < 0 or self.BATCH_DETAIL_DELAY < 0:
            raise ValueError("batch delays must not be negative")
        return self


def load_settings(**overrides) -> Settings:
    """Build settings from the environment, turning validation errors into ConfigurationError."""
    try:
        return Settings(**overrides)
    except ValueError as e:
        raise ConfigurationError(f"invalid configuration: {e}") from e
