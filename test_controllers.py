import asyncio

import httpx
import pytest

from albumfinder.controllers import SearchController, SearchSession, SuggestionController
from albumfinder.models import Album, Artist
from albumfinder.state import SearchState

pytestmark = pytest.mark.asyncio


class SlowFirstCatalog:
    """First suggestion query blocks until released; later ones answer at once."""

    def __init__(self, slow_query):
        self.slow_query = slow_query
        self.release = asyncio.Event()
        self.started = asyncio.Event()

    async def search_suggestions(self, query, token, limit=5):
        if query == self.slow_query:
            self.started.set()
            await self.release.wait()
            return [Artist("old", f"{query} (stale)")]
        return [Artist("new", query)]


def _controllers(catalog, token="tok"):
    state = SearchState(access_token=token)
    suggestions = SuggestionController(state, catalog)
    search = SearchController(state, catalog, suggestions)
    return state, suggestions, search


async def test_input_fetches_suggestions(fake_catalog, radiohead):
    catalog = fake_catalog(suggestions={"radio": [radiohead]})
    state, suggestions, _ = _controllers(catalog)

    await suggestions.on_input("radio")

    assert state.query_text == "radio"
    assert state.suggestions == [radiohead]


@pytest.mark.parametrize("text", ["", "   "])
async def test_blank_input_clears_without_request(fake_catalog, radiohead, text):
    catalog = fake_catalog()
    state, suggestions, _ = _controllers(catalog)
    state.suggestions = [radiohead]

    await suggestions.on_input(text)

    assert state.suggestions == []
    assert catalog.calls == []


async def test_input_without_token_clears_without_request(fake_catalog, radiohead):
    catalog = fake_catalog(suggestions={"radio": [radiohead]})
    state, suggestions, _ = _controllers(catalog, token=None)
    state.suggestions = [radiohead]

    await suggestions.on_input("radio")

    assert state.suggestions == []
    assert catalog.calls == []


async def test_empty_result_leaves_no_suggestions(fake_catalog):
    state, suggestions, _ = _controllers(fake_catalog(suggestions={"zzz": []}))

    await suggestions.on_input("zzz")

    assert state.suggestions == []
    assert not state.show_suggestions


async def test_slow_earlier_response_does_not_overwrite_newer():
    catalog = SlowFirstCatalog("ra")
    state, suggestions, _ = _controllers(catalog)

    first = asyncio.create_task(suggestions.on_input("ra"))
    await catalog.started.wait()
    await suggestions.on_input("ram")
    catalog.release.set()
    await first

    assert state.query_text == "ram"
    assert state.suggestions == [Artist("new", "ram")]


async def test_slow_response_after_clearing_is_dropped():
    catalog = SlowFirstCatalog("ra")
    state, suggestions, _ = _controllers(catalog)

    first = asyncio.create_task(suggestions.on_input("ra"))
    await catalog.started.wait()
    await suggestions.on_input("")
    catalog.release.set()
    await first

    assert state.suggestions == []


async def test_suggestion_network_error_keeps_list(fake_catalog, radiohead):
    class Failing:
        async def search_suggestions(self, query, token, limit=5):
            raise httpx.ConnectError("down")

    state, suggestions, _ = _controllers(Failing())
    state.suggestions = [radiohead]

    await suggestions.on_input("radio")

    assert state.suggestions == [radiohead]


async def test_submit_replaces_albums_and_clears_suggestions(fake_catalog, radiohead, album_x):
    old = Album("old", "Old", "1999-01-01")
    catalog = fake_catalog(artists={"Radiohead": "r1"}, albums={"r1": [album_x]})
    state, _, search = _controllers(catalog)
    state.albums = [old]
    state.suggestions = [radiohead]

    await search.on_submit("Radiohead")

    assert state.albums == [album_x]
    assert state.suggestions == []
    assert catalog.calls == [("best", "Radiohead"), ("albums", "r1")]


async def test_submit_uses_query_text_when_no_name_given(fake_catalog, album_x):
    catalog = fake_catalog(artists={"Radiohead": "r1"}, albums={"r1": [album_x]})
    state, _, search = _controllers(catalog)
    state.query_text = "Radiohead"

    await search.submit()

    assert state.albums == [album_x]


async def test_submit_without_match_leaves_grid_unchanged(fake_catalog, radiohead, album_x):
    catalog = fake_catalog(artists={})
    state, _, search = _controllers(catalog)
    state.albums = [album_x]
    state.suggestions = [radiohead]

    await search.on_submit("nobody at all")

    assert state.albums == [album_x]
    assert state.suggestions == [radiohead]
    assert catalog.calls == [("best", "nobody at all")]


@pytest.mark.parametrize("token,text", [(None, "Radiohead"), ("tok", "  ")])
async def test_submit_does_nothing_without_token_or_text(fake_catalog, token, text):
    catalog = fake_catalog(artists={"Radiohead": "r1"})
    _, _, search = _controllers(catalog, token=token)

    await search.on_submit(text)

    assert catalog.calls == []


async def test_album_network_error_keeps_grid(fake_catalog, album_x):
    catalog = fake_catalog(artists={"Radiohead": "r1"}, albums={"r1": httpx.ReadTimeout("slow")})
    state, _, search = _controllers(catalog)
    state.albums = [album_x]

    await search.on_submit("Radiohead")

    assert state.albums == [album_x]


async def test_artist_lookup_network_error_keeps_grid(fake_catalog, album_x):
    catalog = fake_catalog(artists={"Radiohead": httpx.ConnectError("down")})
    state, _, search = _controllers(catalog)
    state.albums = [album_x]

    await search.on_submit("Radiohead")

    assert state.albums == [album_x]
    assert catalog.calls == [("best", "Radiohead")]


async def test_select_suggestion_sets_text_clears_and_searches(fake_catalog, radiohead, album_x):
    catalog = fake_catalog(artists={"Radiohead": "r1"}, albums={"r1": [album_x]})
    state, _, search = _controllers(catalog)
    state.query_text = "radi"
    state.suggestions = [radiohead]

    await search.select_suggestion("Radiohead")

    assert state.query_text == "Radiohead"
    assert state.suggestions == []
    assert state.albums == [album_x]
    assert catalog.calls == [("best", "Radiohead"), ("albums", "r1")]


async def test_select_suggestion_clears_even_without_match(fake_catalog, radiohead):
    state, _, search = _controllers(fake_catalog())
    state.suggestions = [radiohead]

    await search.select_suggestion("Radiohead")

    assert state.query_text == "Radiohead"
    assert state.suggestions == []


async def test_pending_suggestions_dropped_after_submit(album_x):
    class Catalog(SlowFirstCatalog):
        async def search_best_artist(self, query, token):
            return "r1"

        async def list_albums(self, artist_id, token, **kwargs):
            return [album_x]

    catalog = Catalog("Radiohead")
    state, suggestions, search = _controllers(catalog)

    pending = asyncio.create_task(suggestions.on_input("Radiohead"))
    await catalog.started.wait()
    await search.on_submit("Radiohead")
    catalog.release.set()
    await pending

    assert state.albums == [album_x]
    assert state.suggestions == []


async def test_session_start_stores_token(fake_catalog, static_token):
    session = SearchSession(fake_catalog())

    await session.start(static_token("tok"))

    assert session.state.access_token == "tok"
    assert session.state.albums == []
    assert session.state.suggestions == []


async def test_session_start_without_token(fake_catalog, static_token):
    session = SearchSession(fake_catalog())

    await session.start(static_token(None))

    assert session.state.access_token is None


async def test_slow_earlier_search_does_not_replace_newer_grid(album_x):
    older = Album("b1", "Older Search", "1997-05-21")

    class Catalog:
        def __init__(self):
            self.release = asyncio.Event()
            self.started = asyncio.Event()

        async def search_best_artist(self, query, token):
            return {"Blur": "slow", "Radiohead": "fast"}[query]

        async def list_albums(self, artist_id, token, **kwargs):
            if artist_id == "slow":
                self.started.set()
                await self.release.wait()
                return [older]
            return [album_x]

    catalog = Catalog()
    state, _, search = _controllers(catalog)

    first = asyncio.create_task(search.on_submit("Blur"))
    await catalog.started.wait()
    await search.on_submit("Radiohead")
    catalog.release.set()
    await first

    assert state.albums == [album_x]
