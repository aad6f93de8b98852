# app_server.py
"""Run the album search page: `python app_server.py` or `uvicorn app_server:app`."""

import uvicorn

from albumfinder.config import load_settings
from albumfinder.log import configure_logging
from albumfinder.web import create_app

settings = load_settings()
configure_logging(settings.log_level)

app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
