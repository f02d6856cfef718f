"""
Exa Search Agent Tools Registry.

This module provides centralized tool registration for the MCP server.
"""
from mcp.server.fastmcp import FastMCP

from . import api_key, search


def register_all_tools(mcp: FastMCP) -> None:
    """Register all tools with the MCP server.

    Args:
        mcp: The FastMCP server instance
    """
    api_key.register(mcp)
    search.register(mcp)
