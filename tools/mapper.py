# =============================================================================
# tools/mapper.py  —  Tool catalog, request decoding, dispatch, result encoding
# =============================================================================
#
# THE FLOW OF ONE TOOL CALL:
#   1. decode_request(name, arguments)  → a typed ToolRequest, or InvalidRequest
#   2. call_tool() dispatches on the request type to tools/tmdb_tools.py
#   3. the tool returns content blocks, or raises NotFound / NetworkError
#   4. encode_content() / encode_error() build the MCP ToolResult
#
# Everything a reviewer needs to add or change a tool is in this file:
# the catalog entry and one branch of the dispatch switch.
#
# TWO KINDS OF FAILURE:
#   - InvalidRequest: the call itself was malformed (unknown tool, wrong
#     arguments).  Raised BEFORE any tool runs, and reported by FastMCP as
#     an argument-validation failure.
#   - Domain errors (NotFound, NetworkError): the tool ran but has nothing
#     useful to return.  Reported as a normal result with is_error=True.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

import pydantic
from fastmcp.exceptions import ValidationError
from fastmcp.tools import ToolResult
from mcp.types import ContentBlock, Icon, TextContent

from core.errors import NetworkError, NotFound
from core.tmdb_client import TmdbClient
from tools.requests import GetActorInfo, GetMoviesByActor, ToolRequest
from tools.tmdb_tools import get_actor_info, get_movies_by_actor

_ICON_BASE_URL = "https://raw.githubusercontent.com/theREDspace/mcp-server-example/main/icons"


class InvalidRequest(ValidationError):
    """A tool call that doesn't name a known tool or match its schema."""


@dataclass(frozen=True)
class ToolEntry:
    """One entry of the static tool catalog."""

    name: str
    title: str
    description: str
    request_type: type[pydantic.BaseModel]
    icon_url: Optional[str] = None

    @property
    def input_schema(self) -> dict[str, Any]:
        return self.request_type.model_json_schema()

    @property
    def icons(self) -> Optional[list[Icon]]:
        if self.icon_url is None:
            return None
        return [Icon(src=self.icon_url, mimeType="image/png", sizes=["128x128"])]


# =============================================================================
# The catalog
# =============================================================================
# The description is what the LLM reads to decide WHEN to call a tool, so
# it says what comes back and what to pass in.
# =============================================================================
TOOL_CATALOG: tuple[ToolEntry, ...] = (
    ToolEntry(
        name="get_actor_info",
        title="Get Actor Information",
        description=(
            "Search for detailed information about an actor based on their name. "
            "This tool retrieves data such as actor id, biography, birth date and "
            "place of birth, along with a profile picture when one is available. "
            "Use this tool when you want to learn more about a specific actor or "
            "explore their career. Simply provide the actor's name; the returned "
            "actor id can be passed to get_movies_by_actor."
        ),
        request_type=GetActorInfo,
        icon_url=f"{_ICON_BASE_URL}/stallone-128.png",
    ),
    ToolEntry(
        name="get_movies_by_actor",
        title="Get Movies by Actor ID",
        description=(
            "Retrieve a list of movies featuring a specific actor. "
            "Specify `actor_id` to search for movies that the actor appeared in."
        ),
        request_type=GetMoviesByActor,
        icon_url=f"{_ICON_BASE_URL}/movies-128.png",
    ),
)

_CATALOG_BY_NAME = {entry.name: entry for entry in TOOL_CATALOG}


def list_tools() -> tuple[ToolEntry, ...]:
    return TOOL_CATALOG


# =============================================================================
# Decode
# =============================================================================
def decode_request(name: str, arguments: Optional[Mapping[str, Any]]) -> ToolRequest:
    """Turn a raw tool call into the matching typed request.

    Raises:
        InvalidRequest: unknown tool name, or arguments that don't match the
            tool's schema.
    """
    entry = _CATALOG_BY_NAME.get(name)
    if entry is None:
        raise InvalidRequest(f"Unknown tool: {name!r}")

    try:
        return entry.request_type.model_validate(dict(arguments or {}))
    except pydantic.ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidRequest(f"Invalid arguments for tool {name!r}: {problems}") from e


# =============================================================================
# Encode
# =============================================================================
def encode_content(content: Sequence[ContentBlock]) -> ToolResult:
    return ToolResult(content=list(content))


def encode_error(message: str) -> ToolResult:
    return ToolResult(content=[TextContent(type="text", text=message)], is_error=True)


# =============================================================================
# Dispatch
# =============================================================================
async def run_request(request: ToolRequest, client: TmdbClient) -> ToolResult:
    """Run an already-decoded request and encode its outcome."""
    try:
        if isinstance(request, GetActorInfo):
            content = await get_actor_info(request, client)
        elif isinstance(request, GetMoviesByActor):
            content = await get_movies_by_actor(request, client)
        else:
            raise TypeError(f"Unhandled tool request: {type(request).__name__}")
    except (NotFound, NetworkError) as e:
        return encode_error(str(e))
    return encode_content(content)


async def call_tool(
    name: str, arguments: Optional[Mapping[str, Any]], client: TmdbClient
) -> ToolResult:
    """Decode, dispatch and encode one tool call.

    Raises:
        InvalidRequest: before any TMDB request is made, if the call is
            malformed.  Every other failure comes back as an error result.
    """
    request = decode_request(name, arguments)
    return await run_request(request, client)
