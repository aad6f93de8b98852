# albumfinder/client.py
"""HTTP helpers for the Spotify Web API."""

import logging
from typing import Any, Dict

import httpx

from .config import Settings
from .constants import SPOTIFY_API

logger = logging.getLogger(__name__)


def make_http_client(settings: Settings) -> httpx.AsyncClient:
    """Shared client for upstream and helper calls."""
    return httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout, connect=5.0))


def bearer_headers(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def spotify_request(
    http: httpx.AsyncClient,
    method: str,
    path: str,
    token: str,
    *,
    params: dict | None = None,
) -> httpx.Response:
    """Make an authenticated request to the Spotify API."""
    url = f"{SPOTIFY_API}{path}"
    return await http.request(method, url, headers=bearer_headers(token), params=params)


def json_or_empty(r: httpx.Response) -> Dict[str, Any]:
    """Response body as a dict; anything unparseable counts as empty."""
    try:
        data = r.json()
    except ValueError:
        logger.warning("non-JSON response from catalog API (%s)", r.status_code)
        return {}
    return data if isinstance(data, dict) else {}
