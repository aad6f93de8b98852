# albumfinder/log.py
"""Logging setup for the entry scripts."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Install a root stream handler.

    Library modules only create loggers; the scripts that run the web app or
    the MCP server call this once at startup.
    """
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
    # httpx logs every request at INFO, which drowns out our own lines
    logging.getLogger("httpx").setLevel(logging.WARNING)
