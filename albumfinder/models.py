# albumfinder/models.py
"""Catalog records, reduced to the fields the UI uses."""

from typing import Any, Dict, List, NamedTuple, Optional, Tuple


class Artist(NamedTuple):
    id: str
    name: str


class Image(NamedTuple):
    url: str
    width: Optional[int] = None
    height: Optional[int] = None


class Album(NamedTuple):
    """An album as listed for an artist. Images keep upstream order (largest first)."""
    id: str
    name: str
    release_date: str
    images: Tuple[Image, ...] = ()
    spotify_url: Optional[str] = None

    @property
    def cover_url(self) -> Optional[str]:
        return self.images[0].url if self.images else None


def _objects(value: Any) -> List[Dict[str, Any]]:
    """JSON objects of a list; anything else in the payload is ignored."""
    if not isinstance(value, list):
        return []
    return [it for it in value if isinstance(it, dict)]


def parse_artists(items: Any) -> List[Artist]:
    return [
        Artist(id=it["id"], name=it.get("name", ""))
        for it in _objects(items)
        if it.get("id")
    ]


def parse_album(item: Dict[str, Any]) -> Album:
    external_urls = item.get("external_urls")
    images = tuple(
        Image(url=img["url"], width=img.get("width"), height=img.get("height"))
        for img in _objects(item.get("images"))
        if img.get("url")
    )
    return Album(
        id=item["id"],
        name=item.get("name", ""),
        release_date=item.get("release_date", ""),
        images=images,
        spotify_url=external_urls.get("spotify") if isinstance(external_urls, dict) else None,
    )


def parse_albums(items: Any) -> List[Album]:
    return [parse_album(it) for it in _objects(items) if it.get("id")]
