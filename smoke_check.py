# smoke_check.py
"""Live check against the real API: `python smoke_check.py "Artist Name"`."""

import asyncio
import sys

from albumfinder.auth import ServerTokenProvider
from albumfinder.client import make_http_client
from albumfinder.config import load_settings
from albumfinder.log import configure_logging
from albumfinder.search import CatalogClient


async def main(name: str):
    settings = load_settings()
    configure_logging(settings.log_level)
    async with make_http_client(settings) as http:
        token = await ServerTokenProvider(settings, http).get_token()
        if not token:
            print("no token; check SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET")
            return 1
        catalog = CatalogClient(http)
        print([a.name for a in await catalog.search_suggestions(name, token)])
        artist_id = await catalog.search_best_artist(name, token)
        if not artist_id:
            print("no match")
            return 0
        for album in await catalog.list_albums(artist_id, token):
            print(album.release_date, album.name)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "Radiohead")))
