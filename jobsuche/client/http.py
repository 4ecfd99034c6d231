from typing import Optional

import httpx

DEFAULT_API_KEY = "jobboerse-jobsuche"


def get_client(
    api_key: Optional[str] = None,
    *,
    user_agent: str,
    timeout: float,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    headers = {
        "User-Agent": user_agent,
        "Accept": "application/json",
        "X-API-Key": api_key or DEFAULT_API_KEY,
    }
    return httpx.AsyncClient(headers=headers, timeout=timeout, follow_redirects=True, transport=transport)
