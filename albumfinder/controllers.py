# albumfinder/controllers.py
"""Event handlers that drive SearchState."""

import logging
from typing import Optional

import httpx

from .auth import TokenProvider
from .search import CatalogClient
from .state import SearchState

logger = logging.getLogger(__name__)


class SuggestionController:
    """
    Keeps the dropdown in step with the text box.

    Each input event takes a ticket; a response is applied only if its ticket
    is still the newest, so a slow request cannot overwrite a later one.
    """

    def __init__(self, state: SearchState, catalog: CatalogClient):
        self.state = state
        self.catalog = catalog
        self._issued = 0

    def invalidate(self) -> int:
        """Retire every request in flight."""
        self._issued += 1
        return self._issued

    async def on_input(self, text: str) -> None:
        self.state.query_text = text
        ticket = self.invalidate()

        if not text.strip() or not self.state.access_token:
            self.state.suggestions = []
            return

        try:
            artists = await self.catalog.search_suggestions(text, self.state.access_token)
        except httpx.HTTPError as e:
            logger.warning("suggestion request for %r failed: %s", text, e)
            return

        if ticket != self._issued:
            logger.debug("dropping stale suggestions for %r", text)
            return
        self.state.suggestions = artists


class SearchController:
    """Resolves an artist and replaces the album grid."""

    def __init__(self, state: SearchState, catalog: CatalogClient, suggestions: SuggestionController):
        self.state = state
        self.catalog = catalog
        self.suggestions = suggestions
        self._generation = 0

    async def on_submit(self, text: str) -> None:
        """Button or Enter: the box holds `text`."""
        self.state.query_text = text
        await self.submit()

    async def select_suggestion(self, name: str) -> None:
        self.state.query_text = name
        self.state.suggestions = []
        self.suggestions.invalidate()
        await self.submit(name)

    async def submit(self, artist_name: Optional[str] = None) -> None:
        token = self.state.access_token
        query = artist_name or self.state.query_text
        if not token or not query.strip():
            return

        self._generation += 1
        generation = self._generation

        try:
            artist_id = await self.catalog.search_best_artist(query, token)
        except httpx.HTTPError as e:
            logger.warning("artist lookup for %r failed: %s", query, e)
            return
        if not artist_id:
            return

        self.suggestions.invalidate()
        self.state.suggestions = []

        try:
            albums = await self.catalog.list_albums(artist_id, token)
        except httpx.HTTPError as e:
            logger.warning("album listing for %s failed: %s", artist_id, e)
            return

        # a newer search owns the grid now
        if generation != self._generation:
            logger.debug("dropping stale albums for %r", query)
            return
        self.state.albums = albums


class SearchSession:
    """One page load: fresh state, its controllers and its token."""

    def __init__(self, catalog: CatalogClient):
        self.state = SearchState()
        self.suggestions = SuggestionController(self.state, catalog)
        self.search = SearchController(self.state, catalog, self.suggestions)

    async def start(self, token_provider: TokenProvider) -> None:
        self.state.access_token = await token_provider.get_token()
