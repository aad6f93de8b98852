# albumfinder/search.py
"""Artist search and album listing against the Spotify Web API."""

import logging
from typing import List, Optional

import httpx

from .client import json_or_empty, spotify_request
from .constants import (
    ALBUM_PAGE_SIZE,
    DEFAULT_INCLUDE_GROUPS,
    DEFAULT_MARKET,
    SUGGESTION_LIMIT,
)
from .models import Album, Artist, parse_albums, parse_artists

logger = logging.getLogger(__name__)


class CatalogClient:
    """
    Read-only catalog operations.

    Every call takes the bearer token explicitly. Upstream error bodies carry
    no `artists`/`items` and so come back as empty results; transport errors
    (httpx.HTTPError) are left to the caller.
    """

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def _search_artists(self, query: str, token: str, limit: Optional[int]) -> dict:
        params = {"q": query, "type": "artist"}
        if limit is not None:
            params["limit"] = limit
        r = await spotify_request(self.http, "GET", "/search", token, params=params)
        return json_or_empty(r)

    async def search_suggestions(
        self, query: str, token: Optional[str], limit: int = SUGGESTION_LIMIT
    ) -> List[Artist]:
        """Up to `limit` artists matching `query`, for the dropdown."""
        if not query.strip() or not token:
            return []
        data = await self._search_artists(query, token, limit)
        artists = data.get("artists")
        if not isinstance(artists, dict):
            return []
        return parse_artists(artists.get("items"))

    async def search_best_artist(self, query: str, token: Optional[str]) -> Optional[str]:
        """Id of the top artist match, or None."""
        if not query.strip() or not token:
            return None
        data = await self._search_artists(query, token, None)
        artists = data.get("artists")
        matches = parse_artists(artists.get("items")) if isinstance(artists, dict) else []
        if not matches:
            logger.info("no artist matches %r", query)
            return None
        return matches[0].id

    async def list_albums(
        self,
        artist_id: str,
        token: Optional[str],
        group_filter: str = DEFAULT_INCLUDE_GROUPS,
        market: str = DEFAULT_MARKET,
        page_size: int = ALBUM_PAGE_SIZE,
    ) -> List[Album]:
        """First page of the artist's albums."""
        if not token:
            return []
        r = await spotify_request(
            self.http,
            "GET",
            f"/artists/{artist_id}/albums",
            token,
            params={"include_groups": group_filter, "market": market, "limit": page_size},
        )
        albums = parse_albums(json_or_empty(r).get("items"))
        logger.info("artist %s has %d albums", artist_id, len(albums))
        return albums
