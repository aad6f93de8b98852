# albumfinder/constants.py
"""Upstream endpoints and fixed request parameters."""

SPOTIFY_API = "https://api.spotify.com/v1"
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"

# Same-origin token helper served by the web app
TOKEN_HELPER_PATH = "/api/token"

SUGGESTION_LIMIT = 5
ALBUM_PAGE_SIZE = 50
DEFAULT_MARKET = "US"
DEFAULT_INCLUDE_GROUPS = "album"
