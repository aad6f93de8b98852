import httpx
import pytest

from albumfinder.models import Album, Artist, Image


class StaticTokenProvider:
    def __init__(self, token):
        self.token = token
        self.calls = 0

    async def get_token(self):
        self.calls += 1
        return self.token


class FakeCatalog:
    """Canned catalog answers keyed by query / artist id; records every call."""

    def __init__(self, suggestions=None, artists=None, albums=None):
        self.suggestions = suggestions or {}
        self.artists = artists or {}
        self.albums = albums or {}
        self.calls = []

    async def search_suggestions(self, query, token, limit=5):
        self.calls.append(("suggest", query))
        return list(self.suggestions.get(query, []))

    async def search_best_artist(self, query, token):
        self.calls.append(("best", query))
        result = self.artists.get(query)
        if isinstance(result, Exception):
            raise result
        return result

    async def list_albums(self, artist_id, token, **kwargs):
        self.calls.append(("albums", artist_id))
        result = self.albums.get(artist_id, [])
        if isinstance(result, Exception):
            raise result
        return list(result)


@pytest.fixture
def mock_http():
    """Factory: AsyncClient whose requests go to `handler` instead of the network."""
    def make(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return make


@pytest.fixture
def static_token():
    return StaticTokenProvider


@pytest.fixture
def fake_catalog():
    return FakeCatalog


@pytest.fixture
def album_x():
    return Album(
        id="a1",
        name="X",
        release_date="2020-01-01",
        images=(Image(url="u1"),),
        spotify_url="s1",
    )


@pytest.fixture
def radiohead():
    return Artist(id="4Z8W4fKeB5YxbusRsdQVPb", name="Radiohead")
