# albumfinder/views.py
"""
HTML rendering of SearchState.

Everything here is a pure function of the state. Interaction is wired with
htmx attributes that send events back to the web app:

- typing in the box   -> GET  /suggestions  (swaps #suggestions)
- Enter / Search      -> POST /search       (swaps #results)
- clicking a name     -> POST /select       (swaps #results)
"""

import json
from html import escape

from .models import Album
from .state import SearchState

BOOTSTRAP_CSS = "https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css"
HTMX_JS = "https://unpkg.com/htmx.org@1.9.12"

PAGE_STYLE = """
body { background-color: #121212; padding-top: 30px; }
.search-box { position: relative; max-width: 420px; }
.search-box input { height: 35px; border-radius: 5px; margin-right: 10px; }
.suggestions { position: absolute; top: 40px; width: 300px; z-index: 1000;
  border: 1px solid #ccc; border-radius: 5px; box-shadow: 0 4px 8px rgba(0,0,0,0.1); }
.suggestions .list-group-item { cursor: pointer; text-align: left;
  background-color: black; color: white; }
.album-grid { display: flex; flex-flow: row wrap; justify-content: space-around; align-content: center; }
.album-card { background-color: white; margin: 10px 10px 30px; border-radius: 5px; width: 220px; }
.album-card img { border-radius: 4%; }
.album-card .card-title { font-weight: bold; max-width: 200px; font-size: 18px; margin-top: 10px; color: black; }
.album-card .btn { font-weight: bold; font-size: 15px; padding: 10px; }
"""


def _attr(value) -> str:
    return escape(str(value), quote=True)


def render_suggestions(state: SearchState) -> str:
    """Dropdown under the text box; an empty placeholder when there is nothing to show."""
    if not state.show_suggestions:
        return '<div id="suggestions"></div>'

    entries = "".join(
        '<button type="button" class="list-group-item list-group-item-action" '
        f'hx-post="/select" hx-vals="{_attr(json.dumps({"name": artist.name}))}" '
        f'hx-target="#results" data-artist-id="{_attr(artist.id)}">'
        f"{escape(artist.name)}</button>"
        for artist in state.suggestions
    )
    return f'<div id="suggestions" class="list-group suggestions">{entries}</div>'


def render_search_box(state: SearchState) -> str:
    return (
        '<div class="container search-box">'
        '<form class="input-group" hx-post="/search" hx-target="#results">'
        '<input class="form-control" type="search" name="q" autocomplete="off" '
        f'placeholder="Search For Artist" value="{_attr(state.query_text)}" '
        'hx-get="/suggestions" hx-trigger="input changed" hx-target="#suggestions" '
        'hx-swap="outerHTML" hx-sync="this:replace">'
        '<button class="btn btn-primary" type="submit">Search</button>'
        "</form>"
        f"{render_suggestions(state)}"
        "</div>"
    )


def render_album_card(album: Album) -> str:
    cover = album.cover_url
    img = (
        f'<img class="card-img-top" width="200" src="{_attr(cover)}" alt="{_attr(album.name)}">'
        if cover
        else ""
    )
    link = (
        f'<a class="btn btn-dark" href="{_attr(album.spotify_url)}">Album Link</a>'
        if album.spotify_url
        else ""
    )
    return (
        f'<div class="card album-card" data-album-id="{_attr(album.id)}">'
        f"{img}"
        '<div class="card-body">'
        f'<h5 class="card-title">{escape(album.name)}</h5>'
        f'<p class="card-text">Release Date: <br> {escape(album.release_date)}</p>'
        f"{link}"
        "</div></div>"
    )


def render_album_grid(state: SearchState) -> str:
    cards = "".join(render_album_card(album) for album in state.albums)
    return f'<div class="container"><div class="row album-grid">{cards}</div></div>'


def render_results(state: SearchState) -> str:
    """Contents of #results: the search box plus the grid."""
    return render_search_box(state) + render_album_grid(state)


def render_page(state: SearchState) -> str:
    return (
        "<!doctype html>"
        '<html lang="en"><head>'
        '<meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        "<title>Album Finder</title>"
        f'<link rel="stylesheet" href="{BOOTSTRAP_CSS}">'
        f'<script src="{HTMX_JS}"></script>'
        f"<style>{PAGE_STYLE}</style>"
        "</head><body>"
        f'<div id="results">{render_results(state)}</div>'
        "</body></html>"
    )
