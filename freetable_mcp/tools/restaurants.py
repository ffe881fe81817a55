"""MCP tool for listing FreeTable restaurants."""

import logging

from fastmcp import FastMCP

from freetable_mcp.server import get_client
from freetable_mcp.tools.error_messages import format_json, tool_error_message

logger = logging.getLogger(__name__)


def register_restaurant_tools(mcp: FastMCP) -> None:
    """Register restaurant listing tools on the MCP server."""

    @mcp.tool
    async def get_restaurants() -> str:
        """List all restaurants available for booking on FreeTable.

        Returns:
            The restaurant list as indented JSON, or an error description.
        """
        client = get_client()
        try:
            restaurants = await client.list_restaurants()
        except Exception as exc:  # noqa: BLE001
            return tool_error_message("fetching restaurants", exc)
        return format_json(restaurants)
