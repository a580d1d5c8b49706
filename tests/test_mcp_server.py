from __future__ import annotations

import pytest
from fastmcp import Client, FastMCP

from tools.mcp_server import SERVER_NAME, create_server
from tests.conftest import API, make_movie


@pytest.fixture
def server(client) -> FastMCP:
    return create_server(client)


def test_server_identity(server):
    assert server.name == SERVER_NAME


async def test_list_tools_advertises_catalog(server):
    async with Client(server) as mcp_client:
        tools = await mcp_client.list_tools()

    by_name = {tool.name: tool.model_dump(by_alias=True) for tool in tools}
    assert set(by_name) == {"get_actor_info", "get_movies_by_actor"}

    actor = by_name["get_actor_info"]
    assert actor["title"] == "Get Actor Information"
    assert actor["inputSchema"]["required"] == ["actor_name"]
    assert actor["icons"][0]["mimeType"] == "image/png"

    movies = by_name["get_movies_by_actor"]
    assert movies["inputSchema"]["properties"]["actor_id"]["type"] == "integer"


async def test_call_tool_end_to_end(server, transport):
    transport.add_json(
        f"{API}/discover/movie",
        {"results": [make_movie(1, "First Blood", "1982-10-22"), make_movie(2, "Rambo", "")]},
    )

    async with Client(server) as mcp_client:
        result = await mcp_client.call_tool("get_movies_by_actor", {"actor_id": 1234})

    assert not result.is_error
    assert result.content[0].text == "0. First Blood (1982)\n1. Rambo"


async def test_domain_error_reaches_client_as_error_result(server, transport):
    transport.add_json(f"{API}/discover/movie", {"results": []})

    async with Client(server) as mcp_client:
        result = await mcp_client.call_tool(
            "get_movies_by_actor", {"actor_id": 1234}, raise_on_error=False
        )

    assert result.is_error
    assert result.content[0].text == "No movies were found!"


async def test_invalid_arguments_rejected_before_tmdb(server, transport):
    async with Client(server) as mcp_client:
        result = await mcp_client.call_tool(
            "get_movies_by_actor", {"actor_id": "Rambo"}, raise_on_error=False
        )

    assert result.is_error
    assert "Invalid arguments" in result.content[0].text
    assert transport.calls == []
