# albumfinder/config.py
"""Environment-backed settings."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Runtime configuration, passed explicitly to whatever needs it."""
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    dev_mode: bool = False
    token_helper_url: Optional[str] = None
    host: str = "127.0.0.1"
    port: int = 8787
    log_level: str = "INFO"
    http_timeout: float = 10.0

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id and self.client_secret)


def _flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Read settings from the process environment (and a .env file if present)."""
    load_dotenv(env_file)

    return Settings(
        client_id=os.getenv("SPOTIFY_CLIENT_ID") or None,
        client_secret=os.getenv("SPOTIFY_CLIENT_SECRET") or None,
        dev_mode=_flag(os.getenv("ALBUM_FINDER_DEV")),
        token_helper_url=os.getenv("ALBUM_FINDER_TOKEN_URL") or None,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8787")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        http_timeout=float(os.getenv("HTTP_TIMEOUT", "10")),
    )
