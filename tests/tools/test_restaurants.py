"""Tests for freetable_mcp.tools.restaurants: get_restaurants MCP tool."""

from unittest.mock import patch

import httpx
import pytest
from fastmcp import Client, FastMCP

from freetable_mcp.tools.restaurants import register_restaurant_tools


@pytest.fixture
def restaurant_mcp(backend):
    test_mcp = FastMCP("test")
    client_patch = patch(
        "freetable_mcp.tools.restaurants.get_client", side_effect=backend.client
    )
    client_patch.start()
    register_restaurant_tools(test_mcp)
    yield test_mcp, backend
    client_patch.stop()


async def _call(mcp: FastMCP) -> str:
    async with Client(mcp) as client:
        result = await client.call_tool("get_restaurants", {})
    return result.content[0].text


class TestGetRestaurants:
    async def test_relays_pretty_json(self, restaurant_mcp):
        mcp, backend = restaurant_mcp
        backend.respond("GET", "/api/restaurants", json_body=[{"id": 1, "name": "Cafe"}])

        text = await _call(mcp)

        assert text == '[\n  {\n    "id": 1,\n    "name": "Cafe"\n  }\n]'
        assert backend.calls() == [("GET", "/api/restaurants")]

    async def test_http_error_reports_status(self, restaurant_mcp):
        mcp, backend = restaurant_mcp
        backend.respond("GET", "/api/restaurants", status_code=500, text="stack trace")

        text = await _call(mcp)

        assert text == "Error fetching restaurants: 500 Internal Server Error"
        assert "stack trace" not in text

    async def test_transport_error_reports_message(self, restaurant_mcp):
        mcp, backend = restaurant_mcp
        backend.fail("GET", "/api/restaurants", httpx.ConnectError("connection refused"))

        text = await _call(mcp)

        assert text == "Error fetching restaurants: connection refused"

    async def test_error_without_message_is_unknown(self, restaurant_mcp):
        mcp, backend = restaurant_mcp
        backend.fail("GET", "/api/restaurants", httpx.ReadTimeout(""))

        text = await _call(mcp)

        assert text == "Error fetching restaurants: Unknown error"

    async def test_invalid_json_reported_as_error(self, restaurant_mcp):
        mcp, backend = restaurant_mcp
        backend.respond("GET", "/api/restaurants", text="<html>")

        text = await _call(mcp)

        assert text.startswith("Error fetching restaurants: ")

    async def test_tool_declares_no_parameters(self, restaurant_mcp):
        mcp, _ = restaurant_mcp
        async with Client(mcp) as client:
            tools = await client.list_tools()
        tool = next(t for t in tools if t.name == "get_restaurants")
        assert tool.inputSchema.get("properties", {}) == {}
