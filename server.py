# server.py
"""MCP server exposing artist and album lookup over stdio."""

from mcp.server.fastmcp import FastMCP

from albumfinder.auth import ServerTokenProvider
from albumfinder.client import make_http_client
from albumfinder.config import load_settings
from albumfinder.log import configure_logging
from albumfinder.search import CatalogClient
from albumfinder.tools import register_tools

settings = load_settings()
configure_logging(settings.log_level)

mcp = FastMCP("album-finder")

# lives as long as the process
http = make_http_client(settings)
register_tools(mcp, CatalogClient(http), ServerTokenProvider(settings, http))

if __name__ == "__main__":
    mcp.run()
