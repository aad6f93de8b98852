# albumfinder/tools.py
"""MCP tools for artist and album lookup."""

import json

import httpx
from mcp.server.fastmcp import FastMCP

from .auth import TokenProvider
from .constants import SUGGESTION_LIMIT
from .search import CatalogClient

NO_TOKEN = "Unauthorized: could not obtain an access token. Check SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET."


def register_tools(mcp: FastMCP, catalog: CatalogClient, token_provider: TokenProvider) -> None:
    """Register the album lookup tools."""

    @mcp.tool()
    async def spotify_suggest_artists(q: str, limit: int = SUGGESTION_LIMIT) -> str:
        """
        Artists whose names match q; returns a JSON list of {id, name}.
        Feed a name to spotify_artist_albums.
        """
        token = await token_provider.get_token()
        if not token:
            return NO_TOKEN
        try:
            artists = await catalog.search_suggestions(q, token, limit=limit)
        except httpx.HTTPError as e:
            return f"Search failed: {e}"
        return json.dumps([a._asdict() for a in artists], indent=2)

    @mcp.tool()
    async def spotify_artist_albums(artist: str) -> str:
        """
        Albums (US market, first 50) of the best match for an artist name.
        Returns JSON {artist_id, albums: [...]}; artist_id is null when nothing matches.
        """
        token = await token_provider.get_token()
        if not token:
            return NO_TOKEN
        try:
            artist_id = await catalog.search_best_artist(artist, token)
            albums = await catalog.list_albums(artist_id, token) if artist_id else []
        except httpx.HTTPError as e:
            return f"Album lookup failed: {e}"
        out = {
            "artist_id": artist_id,
            "albums": [
                {
                    "id": a.id,
                    "name": a.name,
                    "release_date": a.release_date,
                    "cover_url": a.cover_url,
                    "spotify_url": a.spotify_url,
                }
                for a in albums
            ],
        }
        return json.dumps(out, indent=2)

    @mcp.tool()
    def ping() -> str:
        """Quick ping tool for sanity checks."""
        return "pong"
