# albumfinder/web.py
"""
FastAPI app serving the search page, its event endpoints and the token helper.

The app keeps a single SearchSession per process: a page load from any browser
starts a fresh one, replacing whatever another visitor was looking at.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse

from .auth import TokenError, TokenProvider, build_token_provider, request_client_credentials
from .client import make_http_client
from .config import Settings
from .constants import TOKEN_HELPER_PATH
from .controllers import SearchSession
from .search import CatalogClient
from .views import render_page, render_results, render_suggestions

logger = logging.getLogger(__name__)


def _current_session(request: Request) -> SearchSession:
    # events can arrive before any page load (e.g. after a restart); they get an
    # empty, token-less session
    state = request.app.state
    if state.session is None:
        state.session = SearchSession(CatalogClient(state.http))
    return state.session


def create_app(
    settings: Settings,
    http: Optional[httpx.AsyncClient] = None,
    token_provider: Optional[TokenProvider] = None,
) -> FastAPI:
    """
    Build the web app.

    `http` and `token_provider` are injectable; when `http` is omitted the app
    owns a client for its lifetime. When `token_provider` is omitted each page
    load picks one from `settings` (dev: direct, otherwise the helper below).
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = app.state.http is None
        if owned:
            app.state.http = make_http_client(settings)
        try:
            yield
        finally:
            if owned:
                await app.state.http.aclose()
                app.state.http = None

    app = FastAPI(title="album-finder", lifespan=lifespan)
    app.state.settings = settings
    app.state.http = http
    app.state.token_provider = token_provider
    app.state.session = None

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        """Page load: new state, new token."""
        session = SearchSession(CatalogClient(request.app.state.http))
        request.app.state.session = session
        provider = request.app.state.token_provider or build_token_provider(
            settings, request.app.state.http, str(request.url_for("token"))
        )
        await session.start(provider)
        if not session.state.access_token:
            logger.warning("page loaded without an access token; searches will come back empty")
        return HTMLResponse(render_page(session.state))

    @app.get("/suggestions", response_class=HTMLResponse)
    async def suggestions(request: Request, q: str = ""):
        session = _current_session(request)
        await session.suggestions.on_input(q)
        return HTMLResponse(render_suggestions(session.state))

    @app.post("/search", response_class=HTMLResponse)
    async def search(request: Request, q: str = Form("")):
        session = _current_session(request)
        await session.search.on_submit(q)
        return HTMLResponse(render_results(session.state))

    @app.post("/select", response_class=HTMLResponse)
    async def select(request: Request, name: str = Form(...)):
        session = _current_session(request)
        await session.search.select_suggestion(name)
        return HTMLResponse(render_results(session.state))

    @app.get(TOKEN_HELPER_PATH, name="token")
    async def token(request: Request):
        """
        Client-credentials exchange done server-side.

        The upstream JSON is forwarded verbatim and always with status 200, so
        an upstream `{"error": ...}` body reaches the caller unchanged.
        """
        if not settings.has_credentials:
            logger.warning("token helper: client credentials are not configured")
        try:
            data = await request_client_credentials(
                request.app.state.http, settings.client_id, settings.client_secret
            )
        except (httpx.HTTPError, TokenError) as e:
            logger.error("token helper: exchange failed: %s", e)
            data = {"error": "token_request_failed"}
        return JSONResponse(data, status_code=200, headers={"Cache-Control": "no-store"})

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    return app
