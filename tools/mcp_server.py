# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the FastMCP server that exposes the TMDB tools over MCP.  Every
#   tool in tools/mapper.py's TOOL_CATALOG becomes one FastMCP tool.
#
# HOW IT WORKS (the flow):
#   1. An MCP client lists tools → FastMCP returns the catalog entries
#      (name, title, description, input schema, icon)
#   2. The client calls a tool by name, e.g. "get_actor_info"
#   3. FastMCP routes the call to CatalogTool.run() below
#   4. run() hands the raw arguments to mapper.call_tool(), which decodes,
#      dispatches to tools/tmdb_tools.py and encodes the result
#   5. The client receives text and image content blocks, or an error result
#
# WHY A Tool SUBCLASS AND NOT @mcp.tool FUNCTIONS?
#   With @mcp.tool, FastMCP derives the schema from the function signature
#   and validates arguments itself.  Here the catalog already owns the
#   schema and the decoding, so each tool is registered with the catalog's
#   schema and all validation happens in one place: mapper.decode_request().
#
# RUNNING THIS SERVER:
#   python main.py        (stdio transport; see main.py)
# =============================================================================

import logging
import os
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastmcp import FastMCP
from fastmcp.tools import Tool, ToolResult
from mcp.types import Icon, ImageContent, TextContent
from pydantic import PrivateAttr

from core.tmdb_client import TmdbClient
from tools.mapper import ToolEntry, call_tool, list_tools

SERVER_NAME = "Techshare MCP Server"
SERVER_VERSION = "0.1.0"
SERVER_INSTRUCTIONS = (
    "Retrieves detailed information about actors and movies from the TMDB "
    "database. Call get_actor_info with an actor's name to get their profile "
    "and TMDB id, then get_movies_by_actor with that id to list their movies."
)
SERVER_WEBSITE_URL = "https://github.com/theREDspace/mcp-server-example"
SERVER_ICON = Icon(
    src="https://avatars.githubusercontent.com/u/4128628?s=128",
    mimeType="image/png",
    sizes=["128x128"],
)

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to its client over STDOUT
# (stdio transport).  A log line on stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for intermediate status/progress messages
# =============================================================================
_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

logger = logging.getLogger("mcp_server")


def configure_logging(level: str = "") -> None:
    """Send all logging to stderr.  LOG_LEVEL overrides the default INFO."""
    logging.basicConfig(
        level=(level or os.environ.get("LOG_LEVEL") or "INFO").upper(),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, params: dict[str, Any]) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _describe_block(block: Any) -> str:
    # Images are base64 blobs; log their size, not their bytes.
    if isinstance(block, ImageContent):
        return f"image({block.model_dump(by_alias=True)['mimeType']}, {len(block.data)} b64 chars)"
    if isinstance(block, TextContent):
        first_line = block.text.split("\n", 1)[0]
        return f"text({first_line!r}, {len(block.text)} chars)"
    return type(block).__name__


def _log_response(tool_name: str, result: ToolResult) -> ToolResult:
    """Log a one-line summary of the tool result in GREEN, then return it."""
    kind = "error" if result.is_error else "ok"
    blocks = ", ".join(_describe_block(block) for block in result.content)
    logger.info(f"{_GREEN}  ← {tool_name} {kind}: [{blocks}]{_RESET}")
    return result


# =============================================================================
# Catalog-backed tool
# =============================================================================
class CatalogTool(Tool):
    """FastMCP tool whose schema and behavior come from a catalog entry."""

    _client: Any = PrivateAttr(default=None)

    def __init__(self, entry: ToolEntry, client: TmdbClient):
        super().__init__(
            name=entry.name,
            title=entry.title,
            description=entry.description,
            parameters=entry.input_schema,
            icons=entry.icons,
        )
        self._client = client

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        _log_request(self.name, arguments)
        result = await call_tool(self.name, arguments, self._client)
        return _log_response(self.name, result)


# =============================================================================
# Server factory
# =============================================================================
def create_server(client: TmdbClient) -> FastMCP:
    """Build the FastMCP server around an already-configured TMDB client.

    The server owns the client from here on and closes it on shutdown.
    """

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[dict]:
        try:
            yield {}
        finally:
            _log_status("Closing TMDB client")
            await client.aclose()

    mcp = FastMCP(
        SERVER_NAME,
        instructions=SERVER_INSTRUCTIONS,
        version=SERVER_VERSION,
        website_url=SERVER_WEBSITE_URL,
        icons=[SERVER_ICON],
        lifespan=lifespan,
    )
    for entry in list_tools():
        mcp.add_tool(CatalogTool(entry, client))
        _log_status(f"Registered tool {entry.name}")
    return mcp
