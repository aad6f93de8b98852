# albumfinder/auth.py
"""Client-credentials token acquisition."""

import base64
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx

from .config import Settings
from .constants import SPOTIFY_TOKEN_URL

logger = logging.getLogger(__name__)


class TokenError(RuntimeError):
    """Token endpoint answered with something we cannot use."""
    pass


def b64_client_creds(client_id, client_secret) -> str:
    raw = f"{client_id}:{client_secret}".encode()
    return base64.b64encode(raw).decode()


def _json_body(r: httpx.Response) -> Dict[str, Any]:
    try:
        data = r.json()
    except ValueError as e:
        raise TokenError(f"token endpoint returned a non-JSON body ({r.status_code})") from e
    if not isinstance(data, dict):
        raise TokenError(f"token endpoint returned unexpected JSON ({r.status_code})")
    return data


async def request_client_credentials(
    http: httpx.AsyncClient, client_id: Optional[str], client_secret: Optional[str]
) -> Dict[str, Any]:
    """
    Exchange client credentials for a token and return the upstream JSON as-is.

    Error statuses are not raised: an `{"error": ...}` body is returned like any
    other so the caller can forward it verbatim.
    """
    headers = {
        "Authorization": f"Basic {b64_client_creds(client_id, client_secret)}",
        "Content-Type": "application/x-www-form-urlencoded",
    }
    r = await http.post(SPOTIFY_TOKEN_URL, data={"grant_type": "client_credentials"}, headers=headers)
    if r.status_code != 200:
        logger.warning("token endpoint answered %s", r.status_code)
    return _json_body(r)


def access_token_from(payload: Dict[str, Any]) -> str:
    token = payload.get("access_token")
    if not token:
        raise TokenError(f"no access_token in response: {payload.get('error') or payload}")
    return token


class TokenProvider(ABC):
    """
    Source of a bearer token for one page load.

    get_token() never raises: failures are logged and reported as None, which
    leaves the session without a token (catalog calls then come back empty).
    """

    source = "token provider"

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    @abstractmethod
    async def _fetch(self) -> Dict[str, Any]:
        """Raw token endpoint JSON."""

    async def get_token(self) -> Optional[str]:
        try:
            token = access_token_from(await self._fetch())
        except (httpx.HTTPError, TokenError) as e:
            logger.error("Failed to fetch token from %s: %s", self.source, e)
            return None
        logger.info("obtained access token from %s", self.source)
        return token


class DirectTokenProvider(TokenProvider):
    """
    Development only: talks to the accounts service with the client secret.

    Never use this where the secret must stay on the server.
    """

    source = "accounts service (direct)"

    def __init__(self, settings: Settings, http: httpx.AsyncClient):
        super().__init__(http)
        self.settings = settings

    async def _fetch(self) -> Dict[str, Any]:
        data = {
            "grant_type": "client_credentials",
            "client_id": self.settings.client_id,
            "client_secret": self.settings.client_secret,
        }
        r = await self.http.post(
            SPOTIFY_TOKEN_URL,
            data=data,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        return _json_body(r)


class HelperTokenProvider(TokenProvider):
    """Production: asks the same-origin helper, which holds the credentials."""

    def __init__(self, url: str, http: httpx.AsyncClient):
        super().__init__(http)
        self.url = url
        self.source = url

    async def _fetch(self) -> Dict[str, Any]:
        r = await self.http.get(self.url)
        return _json_body(r)


class ServerTokenProvider(TokenProvider):
    """Basic-auth exchange for processes that hold the credentials themselves."""

    source = "accounts service"

    def __init__(self, settings: Settings, http: httpx.AsyncClient):
        super().__init__(http)
        self.settings = settings

    async def _fetch(self) -> Dict[str, Any]:
        return await request_client_credentials(
            self.http, self.settings.client_id, self.settings.client_secret
        )


def build_token_provider(settings: Settings, http: httpx.AsyncClient, helper_url: str) -> TokenProvider:
    """
    Pick the acquisition mode for a page load.

    Dev mode with both credentials set goes straight to the accounts service;
    everything else goes through the helper at `helper_url` (or the configured
    override).
    """
    if settings.dev_mode and settings.has_credentials:
        logger.warning("dev mode: requesting tokens directly with the client secret")
        return DirectTokenProvider(settings, http)
    return HelperTokenProvider(settings.token_helper_url or helper_url, http)
