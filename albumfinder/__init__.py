"""Artist album search backed by the Spotify Web API."""
