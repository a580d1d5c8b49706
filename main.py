# =============================================================================
# main.py  —  Entry Point for the TMDB MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads environment variables from .env (TMDB_TOKEN, TMDB_TIMEOUT, ...)
#   2. Builds an immutable TmdbConfig; exits right away if TMDB_TOKEN is
#      missing, before any MCP client can connect
#   3. Creates the TMDB client and the FastMCP server (tools/mcp_server.py)
#   4. Serves MCP over stdio until the client disconnects
#
# CONNECTING A CLIENT:
#   Point any MCP host (Claude Desktop, MCP Inspector, an ADK MCPToolset...)
#   at this script as a stdio server:
#       command: "uv", args: ["run", "python", "/path/to/main.py"]
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

# Load .env BEFORE reading the config: TmdbConfig.from_env() only looks at
# the process environment.
load_dotenv()

from core.config import TmdbConfig
from core.errors import StartupConfigError
from core.tmdb_client import TmdbClient
from tools.mcp_server import configure_logging, create_server

logger = logging.getLogger(__name__)


def main() -> int:
    configure_logging()

    try:
        config = TmdbConfig.from_env()
    except StartupConfigError as e:
        logger.error(f"Cannot start: {e}")
        return 1

    server = create_server(TmdbClient(config))
    logger.info("Serving TMDB tools over stdio")
    server.run(show_banner=False)
    return 0


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    sys.exit(main())
